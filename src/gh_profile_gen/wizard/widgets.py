"""
Interactive input widgets for the profile wizard.

Each widget keeps its own state and exposes two faces: explicit operations
(``insert_char``, ``move_down``, ``confirm`` ...) and ``handle_key``, which maps
the abstract key vocabulary onto those operations. Neither face raises on bad
input; out-of-range moves, empty confirmations and the like are ignored.

Composite widgets own their TextBuffers outright. Nothing here is shared
between widget instances.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from gh_profile_gen.wizard.keys import KeyCode, KeyEvent

logger = logging.getLogger(__name__)


# =============================================================================
# TextBuffer
# =============================================================================


class TextBuffer:
    """Single-line editable text with a cursor.

    The cursor always sits in ``[0, len(value)]``.
    """

    def __init__(self, label: str = "", value: str = "") -> None:
        self.label = label
        self._value = value
        self._cursor = len(value)
        self.focused = False

    def __repr__(self) -> str:
        return f"TextBuffer(label={self.label!r}, value={self._value!r}, cursor={self._cursor})"

    @property
    def value(self) -> str:
        return self._value

    @property
    def cursor(self) -> int:
        return self._cursor

    def insert_char(self, char: str) -> None:
        """Insert one character at the cursor and step past it."""
        for c in char:
            self._value = self._value[: self._cursor] + c + self._value[self._cursor :]
            self._cursor += 1

    def delete_backward(self) -> None:
        """Remove the character before the cursor (Backspace)."""
        if self._cursor == 0:
            return
        self._value = self._value[: self._cursor - 1] + self._value[self._cursor :]
        self._cursor -= 1

    def delete_forward(self) -> None:
        """Remove the character under the cursor (Delete)."""
        if self._cursor >= len(self._value):
            return
        self._value = self._value[: self._cursor] + self._value[self._cursor + 1 :]

    def move_left(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def move_right(self) -> None:
        if self._cursor < len(self._value):
            self._cursor += 1

    def move_home(self) -> None:
        self._cursor = 0

    def move_end(self) -> None:
        self._cursor = len(self._value)

    def set_value(self, value: str) -> None:
        """Replace the content and put the cursor at the end."""
        self._value = value
        self._cursor = len(value)

    def clear(self) -> None:
        self._value = ""
        self._cursor = 0

    def handle_key(self, event: KeyEvent) -> None:
        if event.ctrl:
            return

        code = event.code
        if code == KeyCode.CHAR and event.char:
            self.insert_char(event.char)
        elif code == KeyCode.SPACE:
            self.insert_char(" ")
        elif code == KeyCode.BACKSPACE:
            self.delete_backward()
        elif code == KeyCode.DELETE:
            self.delete_forward()
        elif code == KeyCode.LEFT:
            self.move_left()
        elif code == KeyCode.RIGHT:
            self.move_right()
        elif code == KeyCode.HOME:
            self.move_home()
        elif code == KeyCode.END:
            self.move_end()


# =============================================================================
# Toggle
# =============================================================================


class Toggle:
    """Boolean on/off switch."""

    def __init__(self, label: str = "", value: bool = False) -> None:
        self.label = label
        self._value = value
        self.focused = False

    def __repr__(self) -> str:
        return f"Toggle(label={self.label!r}, value={self._value})"

    @property
    def value(self) -> bool:
        return self._value

    def flip(self) -> None:
        self._value = not self._value

    def handle_key(self, event: KeyEvent) -> None:
        if event.is_confirm:
            self.flip()


# =============================================================================
# SingleSelect
# =============================================================================


class SingleSelect:
    """Pick one option from a fixed list.

    Moving the highlight never commits anything; only ``confirm`` does. The
    highlight stops at both ends of the list rather than wrapping.
    """

    def __init__(
        self,
        label: str = "",
        options: Iterable[str] = (),
        default: int | None = None,
    ) -> None:
        self.label = label
        self._options = tuple(options)
        self._highlight = 0
        if default is not None and self._options:
            self._highlight = max(0, min(default, len(self._options) - 1))
        self._selected: int | None = None
        self.focused = False

    def __repr__(self) -> str:
        return (
            f"SingleSelect(label={self.label!r}, highlight={self._highlight}, "
            f"selected={self._selected})"
        )

    @property
    def options(self) -> tuple[str, ...]:
        return self._options

    @property
    def highlight(self) -> int:
        return self._highlight

    @property
    def selected_index(self) -> int | None:
        return self._selected

    @property
    def selected_value(self) -> str | None:
        """The confirmed option, or ``None`` before the first confirm."""
        if self._selected is None:
            return None
        return self._options[self._selected]

    def move_up(self) -> None:
        if self._highlight > 0:
            self._highlight -= 1

    def move_down(self) -> None:
        if self._highlight + 1 < len(self._options):
            self._highlight += 1

    def confirm(self) -> None:
        if self._options:
            self._selected = self._highlight

    def handle_key(self, event: KeyEvent) -> None:
        if event.ctrl:
            return
        if event.code == KeyCode.UP:
            self.move_up()
        elif event.code == KeyCode.DOWN:
            self.move_down()
        elif event.code == KeyCode.ENTER:
            self.confirm()


# =============================================================================
# SearchableList
# =============================================================================


@dataclass
class ListItem:
    """Item in a searchable list."""

    label: str
    category: str | None = None
    selected: bool = False


class ListMode(str, Enum):
    """Typing into the search box, or moving through the filtered items."""

    SEARCH = "search"
    NAVIGATE = "navigate"


class SearchableList:
    """Multi-select list with a search filter and optional categories.

    Filtering only hides items. It never reorders or drops them, so a
    selection made under one filter survives clearing it.

    The highlight is an index into the *visible* items. Editing the query
    leaves it alone; it is pulled back into range the next time the user
    navigates or toggles, and the ``highlight`` property always reports the
    in-range value.
    """

    def __init__(self, labels: Iterable[str] = (), label: str = "Search") -> None:
        self.label = label
        self._items = [ListItem(label=item) for item in labels]
        self.search = TextBuffer("Search")
        self._highlight = 0
        self.mode = ListMode.SEARCH
        self.focused = False

    @classmethod
    def categorized(
        cls,
        categories: Mapping[str, Iterable[str]] | Iterable[tuple[str, Iterable[str]]],
        label: str = "Search",
    ) -> "SearchableList":
        """Build a list whose items carry a category, grouped in insertion order."""
        pairs = categories.items() if isinstance(categories, Mapping) else categories
        widget = cls(label=label)
        for category, labels in pairs:
            for item in labels:
                widget._items.append(ListItem(label=item, category=category))
        return widget

    def __repr__(self) -> str:
        return (
            f"SearchableList(items={len(self._items)}, query={self.query!r}, "
            f"mode={self.mode.value}, highlight={self._highlight})"
        )

    @property
    def items(self) -> list[ListItem]:
        return list(self._items)

    @property
    def query(self) -> str:
        return self.search.value

    def visible_items(self) -> list[ListItem]:
        """Items whose label contains the query, case-insensitively."""
        query = self.search.value.lower()
        if not query:
            return list(self._items)
        return [item for item in self._items if query in item.label.lower()]

    def selected(self) -> list[str]:
        """Labels of every selected item, ignoring the current filter."""
        return [item.label for item in self._items if item.selected]

    def selected_items(self) -> list[ListItem]:
        return [item for item in self._items if item.selected]

    @property
    def highlight(self) -> int:
        return min(self._highlight, max(len(self.visible_items()) - 1, 0))

    def highlighted_item(self) -> ListItem | None:
        visible = self.visible_items()
        if not visible:
            return None
        return visible[self.highlight]

    def select_labels(self, labels: Iterable[str]) -> None:
        """Mark every item whose label is in ``labels`` as selected."""
        wanted = set(labels)
        for item in self._items:
            if item.label in wanted:
                item.selected = True

    def switch_mode(self) -> None:
        if self.mode == ListMode.SEARCH:
            self.mode = ListMode.NAVIGATE
            self._highlight = 0
        else:
            self.mode = ListMode.SEARCH

    def move_up(self) -> None:
        self._highlight = self.highlight
        if self._highlight > 0:
            self._highlight -= 1

    def move_down(self) -> None:
        self._highlight = self.highlight
        if self._highlight + 1 < len(self.visible_items()):
            self._highlight += 1

    def toggle_highlighted(self) -> None:
        self._highlight = self.highlight
        item = self.highlighted_item()
        if item is not None:
            item.selected = not item.selected

    def handle_key(self, event: KeyEvent) -> None:
        if event.ctrl:
            return

        if self.mode == ListMode.SEARCH:
            if event.code == KeyCode.TAB:
                self.switch_mode()
            else:
                self.search.handle_key(event)
            return

        if event.code in (KeyCode.TAB, KeyCode.BACK_TAB):
            self.switch_mode()
        elif event.code == KeyCode.UP:
            self.move_up()
        elif event.code == KeyCode.DOWN:
            self.move_down()
        elif event.is_confirm:
            self.toggle_highlighted()


# =============================================================================
# DynamicList
# =============================================================================


class EntryMode(str, Enum):
    """Typing a new entry, or browsing the ones already added."""

    ADDING = "adding"
    BROWSING = "browsing"


def _remove_at(entries: list, index: int) -> int:
    """Delete ``entries[index]`` and return the highlight to use afterwards."""
    del entries[index]
    if index >= len(entries) and index > 0:
        index -= 1
    return index


class DynamicList:
    """Ordered list of text entries with add and remove.

    Browsing is only possible while there is something to browse; deleting
    the last entry drops back to adding.
    """

    def __init__(self, label: str = "", entries: Iterable[str] = ()) -> None:
        self.label = label
        self._entries = list(entries)
        self.input = TextBuffer("Add new")
        self._highlight = 0
        self.mode = EntryMode.ADDING
        self.focused = False

    def __repr__(self) -> str:
        return f"DynamicList(label={self.label!r}, entries={self._entries!r}, mode={self.mode.value})"

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def highlight(self) -> int:
        return self._highlight

    def confirm_entry(self) -> bool:
        """Append the trimmed draft. Blank drafts are dropped without a trace."""
        value = self.input.value.strip()
        if not value:
            logger.debug("Ignoring blank entry for %s", self.label or "list")
            return False
        self._entries.append(value)
        self.input.clear()
        return True

    def switch_mode(self) -> None:
        if self.mode == EntryMode.BROWSING:
            self.mode = EntryMode.ADDING
        elif self._entries:
            self.mode = EntryMode.BROWSING
            self._highlight = 0

    def move_up(self) -> None:
        if self._highlight > 0:
            self._highlight -= 1

    def move_down(self) -> None:
        if self._highlight + 1 < len(self._entries):
            self._highlight += 1

    def remove_highlighted(self) -> None:
        if not self._entries:
            return
        self._highlight = _remove_at(self._entries, self._highlight)
        if not self._entries:
            self.mode = EntryMode.ADDING

    def handle_key(self, event: KeyEvent) -> None:
        if event.ctrl:
            return

        if self.mode == EntryMode.ADDING:
            if event.code == KeyCode.ENTER:
                self.confirm_entry()
            elif event.code == KeyCode.TAB:
                self.switch_mode()
            else:
                self.input.handle_key(event)
            return

        if event.code in (KeyCode.TAB, KeyCode.BACK_TAB):
            self.switch_mode()
        elif event.code == KeyCode.UP:
            self.move_up()
        elif event.code == KeyCode.DOWN:
            self.move_down()
        elif event.code in (KeyCode.DELETE, KeyCode.BACKSPACE):
            self.remove_highlighted()


# =============================================================================
# PairedList
# =============================================================================


class PairedField(str, Enum):
    """Which half of the pair has focus while adding."""

    FIRST = "first"
    SECOND = "second"


class PairedList:
    """Ordered list of two-field entries, e.g. article title and URL.

    An entry is only added when both fields are non-blank. Browsing follows
    the same rules as ``DynamicList``.
    """

    def __init__(
        self,
        label: str = "",
        first_label: str = "First",
        second_label: str = "Second",
        entries: Iterable[tuple[str, str]] = (),
    ) -> None:
        self.label = label
        self._entries = [(first, second) for first, second in entries]
        self.first = TextBuffer(first_label)
        self.second = TextBuffer(second_label)
        self._highlight = 0
        self.mode = EntryMode.ADDING
        self.focused_field = PairedField.FIRST
        self.focused = False

    def __repr__(self) -> str:
        return (
            f"PairedList(label={self.label!r}, entries={self._entries!r}, "
            f"mode={self.mode.value}, field={self.focused_field.value})"
        )

    @property
    def entries(self) -> list[tuple[str, str]]:
        return list(self._entries)

    @property
    def highlight(self) -> int:
        return self._highlight

    @property
    def active_buffer(self) -> TextBuffer:
        return self.first if self.focused_field == PairedField.FIRST else self.second

    def confirm_pair(self) -> bool:
        first = self.first.value.strip()
        second = self.second.value.strip()
        if not first or not second:
            logger.debug("Ignoring incomplete pair for %s", self.label or "list")
            return False
        self._entries.append((first, second))
        self.first.clear()
        self.second.clear()
        self.focused_field = PairedField.FIRST
        return True

    def _browse(self) -> None:
        self.mode = EntryMode.BROWSING
        self._highlight = 0

    def _add(self) -> None:
        self.mode = EntryMode.ADDING
        self.focused_field = PairedField.FIRST

    def next_field(self) -> None:
        """Tab: First to Second, then on to browsing if there are entries."""
        if self.focused_field == PairedField.FIRST:
            self.focused_field = PairedField.SECOND
        elif self._entries:
            self._browse()
        else:
            self.focused_field = PairedField.FIRST

    def previous_field(self) -> None:
        """Shift+Tab: Second back to First, First on to browsing if possible."""
        if self.focused_field == PairedField.SECOND:
            self.focused_field = PairedField.FIRST
        elif self._entries:
            self._browse()

    def move_up(self) -> None:
        if self._highlight > 0:
            self._highlight -= 1

    def move_down(self) -> None:
        if self._highlight + 1 < len(self._entries):
            self._highlight += 1

    def remove_highlighted(self) -> None:
        if not self._entries:
            return
        self._highlight = _remove_at(self._entries, self._highlight)
        if not self._entries:
            self._add()

    def handle_key(self, event: KeyEvent) -> None:
        if event.ctrl:
            return

        if self.mode == EntryMode.ADDING:
            if event.code == KeyCode.ENTER:
                self.confirm_pair()
            elif event.code == KeyCode.TAB:
                self.next_field()
            elif event.code == KeyCode.BACK_TAB:
                self.previous_field()
            else:
                self.active_buffer.handle_key(event)
            return

        if event.code in (KeyCode.TAB, KeyCode.BACK_TAB):
            self._add()
        elif event.code == KeyCode.UP:
            self.move_up()
        elif event.code == KeyCode.DOWN:
            self.move_down()
        elif event.code in (KeyCode.DELETE, KeyCode.BACKSPACE):
            self.remove_highlighted()


Widget = TextBuffer | Toggle | SingleSelect | SearchableList | DynamicList | PairedList
