"""
Abstract key vocabulary for the wizard.

Widgets only ever see these logical key codes; whichever terminal library
reads the keyboard is responsible for translating into them.
"""

from dataclasses import dataclass
from enum import Enum


class KeyCode(str, Enum):
    """Logical key codes."""

    CHAR = "char"
    BACKSPACE = "backspace"
    DELETE = "delete"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    TAB = "tab"
    BACK_TAB = "back_tab"
    SPACE = "space"

    # Host-level keys, never consumed by widgets
    ESCAPE = "escape"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press."""

    code: KeyCode
    char: str | None = None
    ctrl: bool = False

    @classmethod
    def of(cls, code: KeyCode, ctrl: bool = False) -> "KeyEvent":
        """Build a non-character key event."""
        return cls(code=code, ctrl=ctrl)

    @classmethod
    def character(cls, char: str, ctrl: bool = False) -> "KeyEvent":
        """Build a character key event. A space becomes ``KeyCode.SPACE``."""
        if char == " ":
            return cls(code=KeyCode.SPACE, char=" ", ctrl=ctrl)
        return cls(code=KeyCode.CHAR, char=char, ctrl=ctrl)

    @property
    def is_confirm(self) -> bool:
        """Enter or Space, the keys that flip toggles and mark list items."""
        return not self.ctrl and self.code in (KeyCode.ENTER, KeyCode.SPACE)

    def is_ctrl_char(self, char: str) -> bool:
        """Check for a control chord such as ctrl+g."""
        return self.ctrl and self.code == KeyCode.CHAR and self.char == char


def typed(text: str) -> list[KeyEvent]:
    """Turn a string into the character events that would type it."""
    return [KeyEvent.character(c) for c in text]
