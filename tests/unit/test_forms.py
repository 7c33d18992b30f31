"""
Unit tests for step forms and the step-to-config adapters.
"""

import pytest

from gh_profile_gen.config.profile import About, HeaderStyle, ProfileConfig, Template
from gh_profile_gen.wizard.core import Mode, WizardState
from gh_profile_gen.wizard.forms import (
    STEP_FORMS,
    StepForm,
    apply_form,
    build_form,
    handle_step_key,
    merge_section,
)
from gh_profile_gen.wizard.keys import KeyCode, KeyEvent, typed
from gh_profile_gen.wizard.steps import StepAction, WizardStep
from gh_profile_gen.wizard.widgets import DynamicList, EntryMode, SearchableList, Toggle

K = KeyCode


def feed(form: StepForm, *keys: KeyCode | str | KeyEvent) -> StepAction:
    """Send keys to a form and return the last action."""
    action = StepAction.CONTINUE
    for key in keys:
        if isinstance(key, KeyEvent):
            events = [key]
        elif isinstance(key, KeyCode):
            events = [KeyEvent.of(key)]
        else:
            events = typed(key)
        for event in events:
            action = handle_step_key(form, event)
    return action


def form_at(step: WizardStep, mode: Mode = Mode.BASIC, config: ProfileConfig | None = None):
    state = WizardState(mode, config)
    while state.current_step is not step:
        state.next_step()
    return state, build_form(state)


# =============================================================================
# Table Tests
# =============================================================================


class TestStepFormTable:
    """Tests for the STEP_FORMS adapter table."""

    def test_every_step_has_an_entry(self):
        assert set(STEP_FORMS) == set(WizardStep)

    @pytest.mark.parametrize("step", list(WizardStep))
    @pytest.mark.parametrize("mode", list(Mode))
    def test_build_and_apply_untouched_form(self, step, mode):
        """An untouched form applies cleanly and leaves optional sections empty."""
        state, form = form_at(step, mode)
        assert form.step is step
        apply_form(form, state)
        assert state.config.to_dict() == {"meta": {"username": ""}}

    def test_preview_has_no_fields(self):
        _, form = form_at(WizardStep.PREVIEW_GENERATE)
        assert form.fields == []
        assert form.focused_field is None

    def test_advanced_identity_adds_fields(self):
        _, basic = form_at(WizardStep.IDENTITY, Mode.BASIC)
        _, advanced = form_at(WizardStep.IDENTITY, Mode.ADVANCED)
        assert basic.keys() == ["username", "name", "style", "tagline"]
        assert advanced.keys()[:4] == basic.keys()
        assert "typing_lines" in advanced.keys()
        assert "banner_url" in advanced.keys()

    def test_first_field_is_focused(self):
        _, form = form_at(WizardStep.ABOUT)
        assert form.fields[0].widget.focused is True
        assert not any(f.widget.focused for f in form.fields[1:])


# =============================================================================
# Key Handling Tests
# =============================================================================


class TestHandleStepKey:
    """Tests for step-level key routing."""

    @pytest.mark.parametrize(
        "event,expected",
        [
            (KeyEvent.character("g", ctrl=True), StepAction.GENERATE),
            (KeyEvent.of(K.ESCAPE), StepAction.QUIT),
            (KeyEvent.character("c", ctrl=True), StepAction.QUIT),
            (KeyEvent.of(K.PAGE_DOWN), StepAction.NEXT_STEP),
            (KeyEvent.character("n", ctrl=True), StepAction.NEXT_STEP),
            (KeyEvent.of(K.PAGE_UP), StepAction.PREV_STEP),
            (KeyEvent.character("p", ctrl=True), StepAction.PREV_STEP),
        ],
    )
    def test_wizard_chords(self, event, expected):
        _, form = form_at(WizardStep.ABOUT)
        assert handle_step_key(form, event) is expected

    def test_generate_works_from_any_step(self):
        for step in WizardStep:
            _, form = form_at(step)
            assert feed(form, KeyEvent.character("g", ctrl=True)) is StepAction.GENERATE

    def test_typing_goes_to_focused_field(self):
        _, form = form_at(WizardStep.ABOUT)
        assert feed(form, "Engineer") is StepAction.CONTINUE
        assert form.widget("role").value == "Engineer"

    def test_tab_moves_between_simple_fields(self):
        _, form = form_at(WizardStep.ABOUT)
        feed(form, K.TAB, K.TAB)
        assert form.focused_field.key == "current_work"
        feed(form, K.BACK_TAB)
        assert form.focused_field.key == "company"
        assert form.widget("company").focused is True

    def test_focus_does_not_move_past_ends(self):
        _, form = form_at(WizardStep.LAYOUT)
        feed(form, K.BACK_TAB)
        assert form.focus == 0
        feed(form, K.TAB, K.TAB, K.TAB, K.TAB)
        assert form.focus == 2

    def test_enter_on_text_advances_then_next_step(self):
        _, form = form_at(WizardStep.ABOUT)
        last = len(form.fields) - 1
        for _ in range(last):
            assert feed(form, K.ENTER) is StepAction.CONTINUE
        assert form.focus == last
        assert feed(form, K.ENTER) is StepAction.NEXT_STEP

    def test_enter_on_select_confirms_and_advances(self):
        _, form = form_at(WizardStep.IDENTITY)
        feed(form, K.TAB, K.TAB)
        assert form.focused_field.key == "style"
        feed(form, K.DOWN, K.ENTER)
        assert form.widget("style").selected_value == HeaderStyle.TEXT.value
        assert form.focused_field.key == "tagline"

    def test_enter_on_toggle_flips_without_moving(self):
        _, form = form_at(WizardStep.STATS)
        feed(form, K.ENTER)
        assert form.widget("stats_card").value is True
        assert form.focus == 0

    def test_composite_widget_consumes_tab(self):
        _, form = form_at(WizardStep.PROJECTS)
        feed(form, "alice/cool-cli", K.ENTER, K.TAB)
        repos = form.widget("repos")
        assert isinstance(repos, DynamicList)
        assert repos.entries == ["alice/cool-cli"]
        assert repos.mode == EntryMode.BROWSING
        assert form.focused_field.key == "repos"

    def test_ctrl_arrows_leave_composite_widget(self):
        _, form = form_at(WizardStep.PROJECTS)
        feed(form, KeyEvent.of(K.DOWN, ctrl=True))
        assert form.focused_field.key == "display"
        feed(form, KeyEvent.of(K.UP, ctrl=True))
        assert form.focused_field.key == "repos"

    def test_enter_on_preview_generates(self):
        _, form = form_at(WizardStep.PREVIEW_GENERATE)
        assert feed(form, K.ENTER) is StepAction.GENERATE
        assert feed(form, "x") is StepAction.CONTINUE

    def test_enter_on_empty_form_moves_on(self):
        form = StepForm(step=WizardStep.ABOUT)
        assert feed(form, K.ENTER) is StepAction.NEXT_STEP


# =============================================================================
# Adapter Tests
# =============================================================================


class TestApplyForms:
    """Tests for copying widget values into the config."""

    def test_welcome_sets_mode(self):
        state, form = form_at(WizardStep.WELCOME)
        assert feed(form, K.DOWN, K.ENTER) is StepAction.NEXT_STEP
        apply_form(form, state)
        assert state.mode == Mode.ADVANCED

    def test_welcome_without_confirm_keeps_mode(self):
        state, form = form_at(WizardStep.WELCOME, Mode.ADVANCED)
        feed(form, K.UP)
        apply_form(form, state)
        assert state.mode == Mode.ADVANCED

    def test_identity(self):
        state, form = form_at(WizardStep.IDENTITY)
        feed(form, "  octocat  ", K.ENTER, "The Octocat", K.ENTER, K.ENTER, "Hi!")
        apply_form(form, state)
        assert state.config.meta.username == "octocat"
        assert state.config.meta.name == "The Octocat"
        assert state.config.header.style == HeaderStyle.TYPING_SVG
        assert state.config.header.tagline == "Hi!"

    def test_text_is_trimmed_and_blank_clears(self):
        state, form = form_at(WizardStep.ABOUT)
        feed(form, "  Engineer ")
        apply_form(form, state)
        assert state.config.about.role == "Engineer"

        form = build_form(state)
        assert form.widget("role").value == "Engineer"
        form.widget("role").clear()
        apply_form(form, state)
        assert state.config.about is None

    def test_hidden_fields_keep_their_values(self, sample_profile):
        state, form = form_at(WizardStep.ABOUT, Mode.BASIC, sample_profile)
        assert "pronouns" not in form.keys()
        form.widget("role").clear()
        apply_form(form, state)
        assert state.config.about == About(pronouns="they/them")

    def test_skills_seeded_and_grouped(self, sample_profile):
        state, form = form_at(WizardStep.SKILLS, config=sample_profile)
        skills = form.widget("skills")
        assert isinstance(skills, SearchableList)
        assert skills.selected() == ["Rust", "Python", "Docker"]

        feed(form, "go", K.TAB, K.ENTER)
        apply_form(form, state)
        assert state.config.skills.languages == ["Rust", "Python", "Go"]
        assert state.config.skills.tools == ["Docker"]
        assert state.config.skills.frameworks is None

    def test_skills_outside_catalog_survive(self):
        config = ProfileConfig.model_validate(
            {"skills": {"languages": ["Rust", "Nim"], "tools": ["Helix"]}}
        )
        state, form = form_at(WizardStep.SKILLS, config=config)
        assert form.widget("skills").selected() == ["Rust", "Nim", "Helix"]

        apply_form(form, state)
        assert state.config.skills.languages == ["Rust", "Nim"]
        assert state.config.skills.tools == ["Helix"]

    def test_skill_outside_catalog_can_be_unmarked(self):
        config = ProfileConfig.model_validate({"skills": {"languages": ["Nim"]}})
        state, form = form_at(WizardStep.SKILLS, config=config)
        feed(form, "nim", K.TAB, " ")
        apply_form(form, state)
        assert state.config.skills is None

    def test_stats_toggle_off_clears_but_keeps_theme(self, sample_profile):
        state, form = form_at(WizardStep.STATS, config=sample_profile)
        toggle = form.widget("stats_card")
        assert isinstance(toggle, Toggle) and toggle.value is True
        feed(form, K.ENTER)
        apply_form(form, state)
        assert state.config.stats.stats_card is None
        assert state.config.stats.theme == "tokyonight"

    def test_advanced_stats_select_starts_on_current_value(self, sample_profile):
        state, form = form_at(WizardStep.STATS, Mode.ADVANCED, sample_profile)
        theme = form.widget("theme")
        assert theme.options[theme.highlight] == "tokyonight"
        assert theme.selected_value is None

    @pytest.mark.parametrize("typed_count,expected", [("8", 8), ("20", 20), ("0", None), ("50", None), ("x", None)])
    def test_top_langs_count(self, typed_count, expected):
        state, form = form_at(WizardStep.STATS, Mode.ADVANCED)
        form.widget("top_langs_count").set_value(typed_count)
        form.widget("streak").flip()
        apply_form(form, state)
        assert state.config.stats.top_langs_count == expected

    def test_projects(self):
        state, form = form_at(WizardStep.PROJECTS)
        feed(form, "alice/one", K.ENTER, "alice/two", K.ENTER)
        feed(form, KeyEvent.of(K.DOWN, ctrl=True), K.DOWN, K.ENTER)
        apply_form(form, state)
        assert state.config.projects.repos == ["alice/one", "alice/two"]
        assert state.config.projects.display.value == "markdown_table"

    def test_blog_articles(self):
        state, form = form_at(WizardStep.BLOG)
        feed(form, K.TAB)
        assert form.focused_field.key == "rss_urls"
        feed(form, KeyEvent.of(K.DOWN, ctrl=True), "Hello", K.TAB, "https://blog.dev/hello", K.ENTER)
        apply_form(form, state)
        assert state.config.blog.articles[0].title == "Hello"
        assert state.config.blog.articles[0].url == "https://blog.dev/hello"
        assert state.config.blog.rss_urls is None

    def test_extras_sponsors(self):
        state, form = form_at(WizardStep.EXTRAS, Mode.ADVANCED)
        form.widget("sponsor_kofi").set_value("alice")
        form.widget("collapsible").first.set_value("More")
        form.widget("collapsible").second.set_value("Hidden text")
        form.widget("collapsible").confirm_pair()
        apply_form(form, state)
        assert state.config.sponsors.kofi == "alice"
        assert state.config.extras.collapsible[0].summary == "More"
        assert state.config.social is None

    def test_layout(self):
        state, form = form_at(WizardStep.LAYOUT)
        feed(form, K.DOWN, K.ENTER, " ")
        apply_form(form, state)
        assert state.config.layout.template == Template.FULL
        assert state.config.layout.dark_mode is True
        assert state.config.layout.centered is None


class TestMergeSection:
    """Tests for overlaying form values on a section."""

    def test_all_unset_is_none(self):
        assert merge_section(None, About, {"role": None}) is None

    def test_overlay_keeps_other_fields(self):
        merged = merge_section(About(role="Dev", company="Acme"), About, {"role": "Lead"})
        assert merged == About(role="Lead", company="Acme")
