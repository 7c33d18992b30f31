"""
Translate Textual key events into the wizard's key vocabulary.
"""

from gh_profile_gen.wizard.keys import KeyCode, KeyEvent

_NAMED_KEYS: dict[str, KeyCode] = {
    "backspace": KeyCode.BACKSPACE,
    "delete": KeyCode.DELETE,
    "left": KeyCode.LEFT,
    "right": KeyCode.RIGHT,
    "home": KeyCode.HOME,
    "end": KeyCode.END,
    "up": KeyCode.UP,
    "down": KeyCode.DOWN,
    "enter": KeyCode.ENTER,
    "tab": KeyCode.TAB,
    "shift+tab": KeyCode.BACK_TAB,
    "space": KeyCode.SPACE,
    "escape": KeyCode.ESCAPE,
    "pageup": KeyCode.PAGE_UP,
    "pagedown": KeyCode.PAGE_DOWN,
}

_CTRL_ARROWS: dict[str, KeyCode] = {
    "up": KeyCode.UP,
    "down": KeyCode.DOWN,
}


def translate_key(key: str, character: str | None = None) -> KeyEvent | None:
    """
    Map a Textual key name (and printable character) to a KeyEvent.

    Args:
        key: Textual key name, e.g. ``"enter"``, ``"ctrl+g"``, ``"a"``.
        character: The printable character for the key, if any.

    Returns:
        The translated event, or None for keys the wizard does not use.
    """
    if key == "space":
        return KeyEvent.character(" ")

    code = _NAMED_KEYS.get(key)
    if code is not None:
        return KeyEvent.of(code)

    if key.startswith("ctrl+"):
        rest = key[len("ctrl+") :]
        if rest in _CTRL_ARROWS:
            return KeyEvent.of(_CTRL_ARROWS[rest], ctrl=True)
        if len(rest) == 1:
            return KeyEvent.character(rest, ctrl=True)
        return None

    if character and len(character) == 1 and character.isprintable():
        return KeyEvent.character(character)

    return None
