"""
Unit tests for the wizard host loop.
"""

from gh_profile_gen.config.profile import ProfileConfig
from gh_profile_gen.wizard.core import Mode
from gh_profile_gen.wizard.keys import KeyCode, KeyEvent
from gh_profile_gen.wizard.session import WizardSession
from gh_profile_gen.wizard.steps import StepAction, WizardStep

K = KeyCode
CTRL_G = KeyEvent.character("g", ctrl=True)


class TestWizardSession:
    """Tests for stepping through the wizard one key at a time."""

    def test_starts_at_welcome(self):
        session = WizardSession()
        assert session.step is WizardStep.WELCOME
        assert session.finished is False
        assert session.result is None

    def test_page_down_and_up_move_between_steps(self, press):
        session = WizardSession()
        press(session, K.PAGE_DOWN, K.PAGE_DOWN)
        assert session.step is WizardStep.ABOUT
        assert session.form.step is WizardStep.ABOUT
        press(session, K.PAGE_UP)
        assert session.step is WizardStep.IDENTITY

    def test_values_are_committed_on_step_change(self, press):
        session = WizardSession()
        press(session, K.PAGE_DOWN, "octocat", K.PAGE_DOWN)
        assert session.step is WizardStep.ABOUT
        assert session.config.meta.username == "octocat"

    def test_values_survive_going_back(self, press):
        session = WizardSession()
        press(session, K.PAGE_DOWN, "octocat", K.PAGE_DOWN, K.PAGE_UP)
        assert session.form.widget("username").value == "octocat"

    def test_welcome_choice_switches_mode(self, press):
        session = WizardSession(Mode.BASIC)
        action = session.process(KeyEvent.of(K.DOWN))
        assert action is StepAction.CONTINUE
        assert session.process(KeyEvent.of(K.ENTER)) is StepAction.NEXT_STEP
        assert session.mode == Mode.ADVANCED
        assert session.step is WizardStep.IDENTITY
        assert "banner_url" in session.form.keys()

    def test_generate_early(self, press):
        session = WizardSession()
        press(session, K.PAGE_DOWN, "alice")
        assert session.process(CTRL_G) is StepAction.GENERATE
        assert session.finished is True
        assert session.cancelled is False
        assert session.result is not None
        assert session.result.meta.username == "alice"

    def test_enter_on_last_step_generates(self, press):
        session = WizardSession()
        for _ in range(11):
            press(session, K.PAGE_DOWN)
        assert session.step is WizardStep.PREVIEW_GENERATE
        assert session.process(KeyEvent.of(K.ENTER)) is StepAction.GENERATE
        assert session.result is not None

    def test_next_on_last_step_stays(self, press):
        session = WizardSession()
        for _ in range(15):
            press(session, K.PAGE_DOWN)
        assert session.step is WizardStep.PREVIEW_GENERATE
        assert session.finished is False

    def test_quit(self, press):
        session = WizardSession()
        press(session, K.PAGE_DOWN, "alice")
        assert session.process(KeyEvent.of(K.ESCAPE)) is StepAction.QUIT
        assert session.finished is True
        assert session.cancelled is True
        assert session.result is None

    def test_events_after_finish_are_ignored(self, press):
        session = WizardSession()
        session.process(CTRL_G)
        result = session.result
        assert session.process(KeyEvent.of(K.PAGE_DOWN)) is StepAction.GENERATE
        assert session.process(KeyEvent.of(K.ESCAPE)) is StepAction.GENERATE
        assert session.result is result
        assert session.step is WizardStep.WELCOME
        assert session.mode == Mode.BASIC

    def test_seed_config(self, sample_profile):
        session = WizardSession(Mode.BASIC, sample_profile)
        session.process(KeyEvent.of(K.PAGE_DOWN))
        assert session.form.widget("username").value == "alice"

    def test_paging_keeps_seeded_skills(self, press):
        config = ProfileConfig.model_validate(
            {"skills": {"languages": ["Rust", "Nim"], "tools": ["Helix"]}}
        )
        session = WizardSession(config=config)
        for _ in range(5):
            press(session, K.PAGE_DOWN)
        assert session.step is WizardStep.STATS
        assert session.config.skills.languages == ["Rust", "Nim"]
        assert session.config.skills.tools == ["Helix"]

    def test_full_walkthrough(self, press):
        """Fill a few steps and generate from the preview."""
        session = WizardSession()
        press(session, K.ENTER)  # Welcome: keep basic
        assert session.step is WizardStep.IDENTITY

        press(session, "octocat", K.ENTER, "Mona", K.PAGE_DOWN)
        press(session, "Engineer", K.PAGE_DOWN)  # About
        press(session, "octocat", K.PAGE_DOWN)  # Social: github
        press(session, "rust", K.TAB, " ", K.PAGE_DOWN)  # Skills
        press(session, K.ENTER, K.PAGE_DOWN)  # Stats: stats card on
        press(session, "octocat/hello", K.ENTER, K.PAGE_DOWN)  # Projects
        for _ in range(4):
            press(session, K.PAGE_DOWN)
        assert session.step is WizardStep.PREVIEW_GENERATE

        assert session.process(KeyEvent.of(K.ENTER)) is StepAction.GENERATE
        assert session.result.to_dict() == {
            "meta": {"username": "octocat", "name": "Mona"},
            "about": {"role": "Engineer"},
            "social": {"github": "octocat"},
            "skills": {"languages": ["Rust"]},
            "stats": {"stats_card": True},
            "projects": {"repos": ["octocat/hello"]},
        }
