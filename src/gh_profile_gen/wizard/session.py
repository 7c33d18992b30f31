"""
Host loop for the profile wizard.

``WizardSession`` feeds key events to the current step form and acts on the
``StepAction`` that comes back: committing the form, moving between steps,
or finishing the run. It is synchronous and handles one event at a time; the
terminal front end only has to translate keys and redraw.
"""

import logging
from collections.abc import Callable

from gh_profile_gen.config.profile import ProfileConfig
from gh_profile_gen.wizard.core import Mode, WizardState
from gh_profile_gen.wizard.forms import StepForm, apply_form, build_form, handle_step_key
from gh_profile_gen.wizard.keys import KeyEvent
from gh_profile_gen.wizard.steps import StepAction, WizardStep

logger = logging.getLogger(__name__)


class WizardSession:
    """Drives one wizard run from the first key press to Generate or Quit."""

    def __init__(self, mode: Mode = Mode.BASIC, config: ProfileConfig | None = None):
        self._state = WizardState(mode, config)
        self._form = build_form(self._state)
        self._final_action: StepAction | None = None
        self._result: ProfileConfig | None = None
        self._final_mode = self._state.mode

    @property
    def form(self) -> StepForm:
        return self._form

    @property
    def step(self) -> WizardStep:
        return self._form.step

    @property
    def mode(self) -> Mode:
        """Wizard mode. Stays readable after the run has finished."""
        if self._state.is_consumed:
            return self._final_mode
        return self._state.mode

    @property
    def config(self) -> ProfileConfig:
        """The config collected so far, or the generated one once finished."""
        if self._result is not None:
            return self._result
        return self._state.config

    @property
    def finished(self) -> bool:
        return self._final_action is not None

    @property
    def cancelled(self) -> bool:
        return self._final_action == StepAction.QUIT

    @property
    def result(self) -> ProfileConfig | None:
        """The generated config, or None until Generate (and after Quit)."""
        return self._result

    def process(self, event: KeyEvent) -> StepAction:
        """
        Handle one key press.

        Args:
            event: The key press.

        Returns:
            The action taken. Once the run has finished every call returns
            the final action and changes nothing.
        """
        if self._final_action is not None:
            return self._final_action

        action = handle_step_key(self._form, event)

        if action == StepAction.NEXT_STEP:
            self._move(self._state.next_step)
        elif action == StepAction.PREV_STEP:
            self._move(self._state.prev_step)
        elif action == StepAction.GENERATE:
            self._generate()
        elif action == StepAction.QUIT:
            logger.info("Wizard cancelled at %s", self._state.current_step.name)
            self._final_action = StepAction.QUIT

        return action

    def _move(self, transition: Callable[[], WizardStep]) -> None:
        apply_form(self._form, self._state)
        before = self._state.current_step
        after = transition()
        if after is not before:
            self._form = build_form(self._state)

    def _generate(self) -> None:
        apply_form(self._form, self._state)
        self._final_mode = self._state.mode
        self._result = self._state.build_config()
        self._final_action = StepAction.GENERATE
        logger.info("Wizard finished for %r", self._result.meta.username or "<unset>")
