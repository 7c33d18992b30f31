"""
Textual front end for the profile wizard.

Every key press is translated and handed to a ``WizardSession``; the screen
is a single read-only text view redrawn after each key.
"""

import logging

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Static

from gh_profile_gen.config.profile import ProfileConfig
from gh_profile_gen.tui.keymap import translate_key
from gh_profile_gen.tui.view import describe_session
from gh_profile_gen.wizard.core import Mode
from gh_profile_gen.wizard.session import WizardSession

logger = logging.getLogger(__name__)


class ProfileWizardApp(App[ProfileConfig | None]):
    """Profile wizard TUI. Returns the generated config, or None on quit."""

    TITLE = "gh-profile-gen"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: $surface;
    }

    #step-view {
        padding: 1 2;
    }
    """

    def __init__(self, session: WizardSession | None = None):
        """Initialize the app.

        Args:
            session: Wizard session to drive. A fresh Basic session by default.
        """
        super().__init__()
        self.session = session or WizardSession()

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll():
            yield Static(id="step-view")
        yield Footer()

    def on_mount(self) -> None:
        self._redraw()

    def on_key(self, event: events.Key) -> None:
        key_event = translate_key(event.key, event.character)
        if key_event is None:
            return

        event.prevent_default()
        event.stop()

        action = self.session.process(key_event)
        logger.debug("Key %s -> %s", event.key, action.name)

        if self.session.finished:
            self.exit(self.session.result)
        else:
            self._redraw()

    def _redraw(self) -> None:
        self.sub_title = self.session.step.label
        self.query_one("#step-view", Static).update(Text(describe_session(self.session)))


def run_profile_wizard(
    mode: Mode = Mode.BASIC,
    config: ProfileConfig | None = None,
) -> ProfileConfig | None:
    """Run the wizard in TUI mode.

    Args:
        mode: Starting wizard mode.
        config: Optional config to pre-seed the forms with.

    Returns:
        The generated config, or None if the user quit.
    """
    app = ProfileWizardApp(WizardSession(mode, config))
    return app.run()
