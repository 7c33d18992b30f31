"""
Step forms: which widgets each wizard step shows and where their values go.

Every step has one entry in ``STEP_FORMS``. ``build`` creates the step's
widgets, seeded from the current config and filtered by mode; ``apply``
copies the widget values back into the config. The host loop calls
``apply`` before leaving a step.

Value rules:
- Text is trimmed; blank text clears the field.
- A toggle that is off leaves its field unset.
- A select only writes when the user confirmed a choice.
- A section whose values are all unset is stored as ``None``.
- Fields hidden in Basic mode keep whatever value the config already has.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from pydantic import BaseModel

from gh_profile_gen.config.profile import (
    About,
    Blog,
    Dynamic,
    Extras,
    Header,
    Layout,
    Projects,
    Skills,
    Social,
    Sponsors,
    Stats,
)
from gh_profile_gen.wizard.catalog import (
    HEADER_STYLES,
    PROJECT_DISPLAYS,
    SKILL_CATALOG,
    SKILL_CATEGORY_TITLES,
    STATS_THEMES,
    TEMPLATES,
    TOP_LANGS_LAYOUTS,
)
from gh_profile_gen.wizard.core import Mode, WizardState
from gh_profile_gen.wizard.keys import KeyCode, KeyEvent
from gh_profile_gen.wizard.steps import StepAction, WizardStep
from gh_profile_gen.wizard.widgets import (
    DynamicList,
    PairedList,
    SearchableList,
    SingleSelect,
    TextBuffer,
    Toggle,
    Widget,
)

logger = logging.getLogger(__name__)

_SKILL_CATEGORY_BY_TITLE = {title: category for category, title in SKILL_CATEGORY_TITLES.items()}

# Returned by a reader when the widget holds no decision of its own
UNSET: Any = object()


# =============================================================================
# Form Model
# =============================================================================


@dataclass
class FormField:
    """One widget on a step form, plus how to read a config value out of it."""

    key: str
    widget: Widget
    read: Callable[[Any], Any]
    composite: bool = False
    advance_on_enter: bool = False

    @property
    def label(self) -> str:
        return self.widget.label

    def value(self) -> Any:
        return self.read(self.widget)


@dataclass
class StepForm:
    """The widgets of one step and which of them has focus."""

    step: WizardStep
    fields: list[FormField] = field(default_factory=list)
    focus: int = 0

    def __post_init__(self) -> None:
        self._sync_focus()

    def _sync_focus(self) -> None:
        for i, form_field in enumerate(self.fields):
            form_field.widget.focused = i == self.focus

    @property
    def focused_field(self) -> FormField | None:
        if not self.fields:
            return None
        return self.fields[self.focus]

    @property
    def on_last_field(self) -> bool:
        return self.focus >= len(self.fields) - 1

    def focus_next(self) -> None:
        if self.focus + 1 < len(self.fields):
            self.focus += 1
            self._sync_focus()

    def focus_prev(self) -> None:
        if self.focus > 0:
            self.focus -= 1
            self._sync_focus()

    def keys(self) -> list[str]:
        return [f.key for f in self.fields]

    def get(self, key: str) -> FormField | None:
        for form_field in self.fields:
            if form_field.key == key:
                return form_field
        return None

    def widget(self, key: str) -> Widget:
        """Look up a widget by field key.

        Raises:
            KeyError: If the form has no such field.
        """
        form_field = self.get(key)
        if form_field is None:
            raise KeyError(key)
        return form_field.widget

    def collect(self, *keys: str) -> dict[str, Any]:
        """Read the named fields that are present and hold a value decision."""
        values: dict[str, Any] = {}
        for key in keys:
            form_field = self.get(key)
            if form_field is None:
                continue
            value = form_field.value()
            if value is not UNSET:
                values[key] = value
        return values


class StepFormSpec(NamedTuple):
    """Adapter pair for one step."""

    build: Callable[[WizardState], list[FormField]]
    apply: Callable[[StepForm, WizardState], None]


# =============================================================================
# Field Builders
# =============================================================================


def _read_text(widget: TextBuffer) -> str | None:
    return widget.value.strip() or None


def _read_toggle(widget: Toggle) -> bool | None:
    return True if widget.value else None


def _read_select(widget: SingleSelect) -> Any:
    value = widget.selected_value
    return UNSET if value is None else value


def _read_entries(widget: DynamicList | PairedList) -> list | None:
    return widget.entries or None


def _read_count(widget: TextBuffer) -> int | None:
    raw = widget.value.strip()
    if raw.isdecimal() and 1 <= int(raw) <= 20:
        return int(raw)
    if raw:
        logger.debug("Ignoring top languages count %r", raw)
    return None


def text(key: str, label: str, value: Any = None) -> FormField:
    seed = "" if value is None else str(value)
    return FormField(key, TextBuffer(label, seed), _read_text, advance_on_enter=True)


def toggle(key: str, label: str, value: bool | None = None) -> FormField:
    return FormField(key, Toggle(label, bool(value)), _read_toggle)


def select(key: str, label: str, options: tuple[str, ...], current: Any = None) -> FormField:
    """Single select whose highlight starts on the current value when known."""
    if current is not None and hasattr(current, "value"):
        current = current.value
    default = options.index(current) if current in options else None
    return FormField(
        key, SingleSelect(label, options, default), _read_select, advance_on_enter=True
    )


def entry_list(key: str, label: str, entries: list[str] | None = None) -> FormField:
    return FormField(key, DynamicList(label, entries or ()), _read_entries, composite=True)


def pair_list(
    key: str,
    label: str,
    first_label: str,
    second_label: str,
    entries: list[tuple[str, str]] | None = None,
) -> FormField:
    widget = PairedList(label, first_label, second_label, entries or ())
    return FormField(key, widget, _read_entries, composite=True)


def _attr(section: BaseModel | None, name: str) -> Any:
    return getattr(section, name) if section is not None else None


def _choices(enum_values: tuple) -> tuple[str, ...]:
    return tuple(member.value for member in enum_values)


# =============================================================================
# Section Helpers
# =============================================================================


def merge_section(
    existing: BaseModel | None,
    model: type[BaseModel],
    updates: dict[str, Any],
) -> Any:
    """
    Overlay form values on an existing config section.

    Args:
        existing: Current section value, or None.
        model: Section model class.
        updates: Field values read from the form.

    Returns:
        The new section, or None when every field ended up unset.
    """
    data = existing.model_dump() if existing is not None else {}
    data.update(updates)
    if all(value is None for value in data.values()):
        return None
    return model.model_validate(data)


def _advanced(state: WizardState) -> bool:
    return state.mode == Mode.ADVANCED


# =============================================================================
# Step Adapters
# =============================================================================


def _build_welcome(state: WizardState) -> list[FormField]:
    return [select("mode", "Wizard mode", _choices(tuple(Mode)), state.mode)]


def _apply_welcome(form: StepForm, state: WizardState) -> None:
    values = form.collect("mode")
    if "mode" in values:
        state.set_mode(Mode(values["mode"]))


def _build_identity(state: WizardState) -> list[FormField]:
    config = state.config
    header = config.header
    fields = [
        text("username", "GitHub username", config.meta.username),
        text("name", "Display name", config.meta.name),
        select("style", "Header style", _choices(HEADER_STYLES), _attr(header, "style")),
        text("tagline", "Tagline", _attr(header, "tagline")),
    ]
    if _advanced(state):
        fields += [
            entry_list("typing_lines", "Typing SVG lines", _attr(header, "typing_lines")),
            text("typing_font", "Typing SVG font", _attr(header, "typing_font")),
            text("typing_color", "Typing SVG colour", _attr(header, "typing_color")),
            text("banner_url", "Banner image URL", _attr(header, "banner_url")),
        ]
    return fields


def _apply_identity(form: StepForm, state: WizardState) -> None:
    config = state.config
    meta = form.collect("username", "name")
    config.meta = config.meta.model_copy(
        update={"username": meta.get("username") or "", "name": meta.get("name")}
    )
    config.header = merge_section(
        config.header,
        Header,
        form.collect(
            "style", "tagline", "typing_lines", "typing_font", "typing_color", "banner_url"
        ),
    )


_ABOUT_BASIC = (
    ("role", "Role / title"),
    ("company", "Company"),
    ("current_work", "Currently working on"),
    ("learning", "Currently learning"),
    ("location", "Location"),
)
_ABOUT_ADVANCED = (
    ("reach_me", "How to reach me"),
    ("fun_fact", "Fun fact"),
    ("pronouns", "Pronouns"),
    ("timezone", "Timezone"),
)

_SOCIAL_BASIC = (
    ("github", "GitHub"),
    ("twitter", "Twitter / X"),
    ("linkedin", "LinkedIn"),
    ("mastodon", "Mastodon"),
    ("bluesky", "Bluesky"),
    ("website", "Website"),
    ("email", "Email"),
)
_SOCIAL_ADVANCED = (
    ("instagram", "Instagram"),
    ("youtube", "YouTube"),
    ("discord", "Discord"),
    ("devto", "DEV.to"),
    ("hashnode", "Hashnode"),
    ("medium", "Medium"),
    ("stackoverflow", "Stack Overflow"),
    ("reddit", "Reddit"),
    ("twitch", "Twitch"),
    ("kofi", "Ko-fi"),
    ("rss", "RSS feed"),
)


def _text_fields(
    state: WizardState,
    section: BaseModel | None,
    basic: tuple[tuple[str, str], ...],
    advanced: tuple[tuple[str, str], ...],
) -> list[FormField]:
    names = basic + advanced if _advanced(state) else basic
    return [text(key, label, _attr(section, key)) for key, label in names]


def _build_about(state: WizardState) -> list[FormField]:
    return _text_fields(state, state.config.about, _ABOUT_BASIC, _ABOUT_ADVANCED)


def _apply_about(form: StepForm, state: WizardState) -> None:
    keys = [key for key, _ in _ABOUT_BASIC + _ABOUT_ADVANCED]
    state.config.about = merge_section(state.config.about, About, form.collect(*keys))


def _build_social(state: WizardState) -> list[FormField]:
    return _text_fields(state, state.config.social, _SOCIAL_BASIC, _SOCIAL_ADVANCED)


def _apply_social(form: StepForm, state: WizardState) -> None:
    keys = [key for key, _ in _SOCIAL_BASIC + _SOCIAL_ADVANCED]
    state.config.social = merge_section(state.config.social, Social, form.collect(*keys))


def _build_skills(state: WizardState) -> list[FormField]:
    skills = state.config.skills
    existing = {category: list(_attr(skills, category) or ()) for category in SKILL_CATALOG}
    # Seeded skills outside the catalog are listed after it so they stay toggleable.
    widget = SearchableList.categorized(
        (
            SKILL_CATEGORY_TITLES[category],
            labels + tuple(label for label in existing[category] if label not in labels),
        )
        for category, labels in SKILL_CATALOG.items()
    )
    for item in widget.items:
        if item.label in existing[_SKILL_CATEGORY_BY_TITLE[item.category]]:
            item.selected = True
    return [FormField("skills", widget, lambda w: w.selected_items(), composite=True)]


def _apply_skills(form: StepForm, state: WizardState) -> None:
    grouped: dict[str, list[str]] = {category: [] for category in SKILL_CATALOG}
    for item in form.collect("skills").get("skills", []):
        grouped[_SKILL_CATEGORY_BY_TITLE[item.category]].append(item.label)
    updates = {category: labels or None for category, labels in grouped.items()}
    state.config.skills = merge_section(state.config.skills, Skills, updates)


def _build_stats(state: WizardState) -> list[FormField]:
    stats = state.config.stats
    fields = [
        toggle("stats_card", "GitHub stats card", _attr(stats, "stats_card")),
        toggle("top_langs", "Top languages card", _attr(stats, "top_langs")),
        toggle("streak", "Streak stats", _attr(stats, "streak")),
    ]
    if _advanced(state):
        count = _attr(stats, "top_langs_count")
        fields += [
            toggle("contributor_stats", "Contributor stats", _attr(stats, "contributor_stats")),
            toggle("trophies", "Trophies", _attr(stats, "trophies")),
            toggle("contribution_snake", "Contribution snake", _attr(stats, "contribution_snake")),
            toggle("profile_views", "Profile views counter", _attr(stats, "profile_views")),
            select("theme", "Card theme", STATS_THEMES, _attr(stats, "theme")),
            toggle("hide_border", "Hide card borders", _attr(stats, "hide_border")),
            select(
                "top_langs_layout",
                "Top languages layout",
                TOP_LANGS_LAYOUTS,
                _attr(stats, "top_langs_layout"),
            ),
            FormField(
                "top_langs_count",
                TextBuffer("Top languages count", "" if count is None else str(count)),
                _read_count,
                advance_on_enter=True,
            ),
        ]
    return fields


def _apply_stats(form: StepForm, state: WizardState) -> None:
    updates = form.collect(*Stats.model_fields)
    state.config.stats = merge_section(state.config.stats, Stats, updates)


def _build_projects(state: WizardState) -> list[FormField]:
    projects = state.config.projects
    return [
        entry_list("repos", "Featured repositories (owner/repo)", _attr(projects, "repos")),
        select("display", "Display style", _choices(PROJECT_DISPLAYS), _attr(projects, "display")),
    ]


def _apply_projects(form: StepForm, state: WizardState) -> None:
    updates = form.collect("repos", "display")
    state.config.projects = merge_section(state.config.projects, Projects, updates)


def _build_blog(state: WizardState) -> list[FormField]:
    blog = state.config.blog
    articles = [(a.title, a.url) for a in _attr(blog, "articles") or ()]
    fields = [
        entry_list("rss_urls", "RSS feed URLs", _attr(blog, "rss_urls")),
        pair_list("articles", "Articles", "Title", "URL", articles),
        text("youtube", "YouTube channel", _attr(blog, "youtube")),
    ]
    if _advanced(state):
        fields.append(text("newsletter", "Newsletter URL", _attr(blog, "newsletter")))
    return fields


def _apply_blog(form: StepForm, state: WizardState) -> None:
    updates = form.collect("rss_urls", "articles", "youtube", "newsletter")
    if updates.get("articles"):
        updates["articles"] = [{"title": t, "url": u} for t, u in updates["articles"]]
    state.config.blog = merge_section(state.config.blog, Blog, updates)


def _build_dynamic(state: WizardState) -> list[FormField]:
    dynamic = state.config.dynamic
    fields = [
        text("spotify_uid", "Spotify user ID", _attr(dynamic, "spotify_uid")),
        toggle("wakatime", "WakaTime stats", _attr(dynamic, "wakatime")),
        toggle("github_activity", "Recent GitHub activity", _attr(dynamic, "github_activity")),
    ]
    if _advanced(state):
        fields.append(
            text("stackoverflow_uid", "Stack Overflow user ID", _attr(dynamic, "stackoverflow_uid"))
        )
    return fields


def _apply_dynamic(form: StepForm, state: WizardState) -> None:
    updates = form.collect(*Dynamic.model_fields)
    state.config.dynamic = merge_section(state.config.dynamic, Dynamic, updates)


_SPONSOR_KEYS = {
    "github_sponsors": "github_sponsors",
    "sponsor_kofi": "kofi",
    "buy_me_a_coffee": "buy_me_a_coffee",
}


def _build_extras(state: WizardState) -> list[FormField]:
    extras = state.config.extras
    fields = [
        text("xbox", "Xbox gamertag", _attr(extras, "xbox")),
        text("steam", "Steam profile", _attr(extras, "steam")),
        text("psn", "PSN ID", _attr(extras, "psn")),
        text("pgp_fingerprint", "PGP fingerprint", _attr(extras, "pgp_fingerprint")),
        entry_list("certifications", "Certifications", _attr(extras, "certifications")),
    ]
    if _advanced(state):
        sponsors = state.config.sponsors
        collapsible = [(c.summary, c.content) for c in _attr(extras, "collapsible") or ()]
        fields += [
            entry_list("custom_blocks", "Custom markdown blocks", _attr(extras, "custom_blocks")),
            pair_list("collapsible", "Collapsible sections", "Summary", "Content", collapsible),
            toggle("github_sponsors", "GitHub Sponsors", _attr(sponsors, "github_sponsors")),
            text("sponsor_kofi", "Ko-fi username", _attr(sponsors, "kofi")),
            text("buy_me_a_coffee", "Buy Me a Coffee username", _attr(sponsors, "buy_me_a_coffee")),
        ]
    return fields


def _apply_extras(form: StepForm, state: WizardState) -> None:
    config = state.config
    updates = form.collect(*Extras.model_fields)
    if updates.get("collapsible"):
        updates["collapsible"] = [
            {"summary": s, "content": c} for s, c in updates["collapsible"]
        ]
    config.extras = merge_section(config.extras, Extras, updates)

    sponsor_values = form.collect(*_SPONSOR_KEYS)
    sponsor_updates = {_SPONSOR_KEYS[key]: value for key, value in sponsor_values.items()}
    config.sponsors = merge_section(config.sponsors, Sponsors, sponsor_updates)


def _build_layout(state: WizardState) -> list[FormField]:
    layout = state.config.layout
    return [
        select("template", "Template", _choices(TEMPLATES), _attr(layout, "template")),
        toggle("dark_mode", "Dark mode friendly", _attr(layout, "dark_mode")),
        toggle("centered", "Centered layout", _attr(layout, "centered")),
    ]


def _apply_layout(form: StepForm, state: WizardState) -> None:
    updates = form.collect("template", "dark_mode", "centered")
    state.config.layout = merge_section(state.config.layout, Layout, updates)


def _no_fields(state: WizardState) -> list[FormField]:
    return []


def _nothing_to_apply(form: StepForm, state: WizardState) -> None:
    return None


STEP_FORMS: dict[WizardStep, StepFormSpec] = {
    WizardStep.WELCOME: StepFormSpec(_build_welcome, _apply_welcome),
    WizardStep.IDENTITY: StepFormSpec(_build_identity, _apply_identity),
    WizardStep.ABOUT: StepFormSpec(_build_about, _apply_about),
    WizardStep.SOCIAL: StepFormSpec(_build_social, _apply_social),
    WizardStep.SKILLS: StepFormSpec(_build_skills, _apply_skills),
    WizardStep.STATS: StepFormSpec(_build_stats, _apply_stats),
    WizardStep.PROJECTS: StepFormSpec(_build_projects, _apply_projects),
    WizardStep.BLOG: StepFormSpec(_build_blog, _apply_blog),
    WizardStep.DYNAMIC: StepFormSpec(_build_dynamic, _apply_dynamic),
    WizardStep.EXTRAS: StepFormSpec(_build_extras, _apply_extras),
    WizardStep.LAYOUT: StepFormSpec(_build_layout, _apply_layout),
    WizardStep.PREVIEW_GENERATE: StepFormSpec(_no_fields, _nothing_to_apply),
}


def build_form(state: WizardState) -> StepForm:
    """Create the form for the state's current step."""
    step = state.current_step
    return StepForm(step=step, fields=STEP_FORMS[step].build(state))


def apply_form(form: StepForm, state: WizardState) -> None:
    """Copy the form's widget values into the state's config."""
    STEP_FORMS[form.step].apply(form, state)
    logger.debug("Applied %s form", form.step.name)


# =============================================================================
# Key Handling
# =============================================================================


def handle_step_key(form: StepForm, event: KeyEvent) -> StepAction:
    """
    Route one key press on a step form.

    Wizard-wide chords are checked first. Everything else goes to the focused
    field, except that Tab moves between simple fields and Enter on a text or
    select field moves on to the next field.

    Args:
        form: Form for the current step.
        event: The key press.

    Returns:
        The action the host loop should take.
    """
    code = event.code

    if event.is_ctrl_char("g"):
        return StepAction.GENERATE
    if code == KeyCode.ESCAPE or event.is_ctrl_char("c"):
        return StepAction.QUIT
    if code == KeyCode.PAGE_DOWN or event.is_ctrl_char("n"):
        return StepAction.NEXT_STEP
    if code == KeyCode.PAGE_UP or event.is_ctrl_char("p"):
        return StepAction.PREV_STEP

    if event.ctrl:
        if code == KeyCode.DOWN:
            form.focus_next()
        elif code == KeyCode.UP:
            form.focus_prev()
        return StepAction.CONTINUE

    if code == KeyCode.ENTER and form.step is WizardStep.PREVIEW_GENERATE:
        return StepAction.GENERATE

    current = form.focused_field
    if current is None:
        return StepAction.NEXT_STEP if code == KeyCode.ENTER else StepAction.CONTINUE

    if not current.composite and code in (KeyCode.TAB, KeyCode.BACK_TAB):
        if code == KeyCode.TAB:
            form.focus_next()
        else:
            form.focus_prev()
        return StepAction.CONTINUE

    current.widget.handle_key(event)

    if current.advance_on_enter and code == KeyCode.ENTER:
        if form.on_last_field:
            return StepAction.NEXT_STEP
        form.focus_next()

    return StepAction.CONTINUE
