"""
Plain text description of the current wizard step.

Deliberately unstyled: the app shows this inside a single Static widget.
"""

from gh_profile_gen.wizard.forms import FormField
from gh_profile_gen.wizard.session import WizardSession
from gh_profile_gen.wizard.steps import WizardStep
from gh_profile_gen.wizard.widgets import (
    DynamicList,
    EntryMode,
    ListMode,
    PairedField,
    PairedList,
    SearchableList,
    SingleSelect,
    TextBuffer,
    Toggle,
)

HELP_LINE = (
    "Tab/Shift+Tab: move  Enter: confirm  PgDn/PgUp: next/previous step  "
    "Ctrl+Up/Down: leave list  Ctrl+G: generate  Esc: quit"
)


def _text(buffer: TextBuffer, show_cursor: bool) -> str:
    if not show_cursor:
        return buffer.value
    return buffer.value[: buffer.cursor] + "|" + buffer.value[buffer.cursor :]


def _marker(active: bool) -> str:
    return ">" if active else " "


def describe_field(form_field: FormField) -> list[str]:
    """Render one form field as lines of text."""
    widget = form_field.widget
    focused = widget.focused
    head = _marker(focused)

    if isinstance(widget, TextBuffer):
        return [f"{head} {widget.label}: {_text(widget, focused)}"]

    if isinstance(widget, Toggle):
        return [f"{head} [{'x' if widget.value else ' '}] {widget.label}"]

    if isinstance(widget, SingleSelect):
        chosen = widget.selected_value or "(not chosen)"
        lines = [f"{head} {widget.label}: {chosen}"]
        if focused:
            for i, option in enumerate(widget.options):
                star = "*" if i == widget.selected_index else " "
                lines.append(f"    {_marker(i == widget.highlight)}{star} {option}")
        return lines

    if isinstance(widget, SearchableList):
        searching = focused and widget.mode == ListMode.SEARCH
        lines = [f"{head} {widget.label}: {_text(widget.search, searching)}"]
        highlighted = widget.highlighted_item() if widget.mode == ListMode.NAVIGATE else None
        category = None
        for item in widget.visible_items():
            if item.category != category:
                category = item.category
                lines.append(f"    {category}")
            check = "x" if item.selected else " "
            lines.append(f"    {_marker(item is highlighted)} [{check}] {item.label}")
        lines.append(f"    Selected: {', '.join(widget.selected()) or '(none)'}")
        return lines

    if isinstance(widget, DynamicList):
        browsing = widget.mode == EntryMode.BROWSING
        lines = [f"{head} {widget.label}"]
        for i, entry in enumerate(widget.entries):
            lines.append(f"    {_marker(browsing and i == widget.highlight)} {entry}")
        adding = focused and not browsing
        lines.append(f"    {widget.input.label}: {_text(widget.input, adding)}")
        return lines

    if isinstance(widget, PairedList):
        browsing = widget.mode == EntryMode.BROWSING
        lines = [f"{head} {widget.label}"]
        for i, (first, second) in enumerate(widget.entries):
            lines.append(f"    {_marker(browsing and i == widget.highlight)} {first}: {second}")
        adding = focused and not browsing
        for buffer, which in ((widget.first, PairedField.FIRST), (widget.second, PairedField.SECOND)):
            active = adding and widget.focused_field == which
            lines.append(f"    {buffer.label}: {_text(buffer, active)}")
        return lines

    return [f"{head} {form_field.label}"]


def describe_session(session: WizardSession) -> str:
    """Render the session's current step as a block of text."""
    step = session.step
    total = len(WizardStep.ordered())
    lines = [f"Step {step.index + 1}/{total}: {step.label}  [{session.mode.value}]", ""]

    if step is WizardStep.PREVIEW_GENERATE:
        config = session.config.to_dict()
        sections = ", ".join(key for key in config if key != "meta") or "none"
        lines.append(f"Username: {session.config.meta.username or '(not set)'}")
        lines.append(f"Sections filled in: {sections}")
        lines.append("")
        lines.append("Press Enter to generate.")
    elif not session.form.fields:
        lines.append("Press Enter to continue.")

    for form_field in session.form.fields:
        lines.extend(describe_field(form_field))

    lines += ["", HELP_LINE]
    return "\n".join(lines)
