"""
Settings merger for gh-profile-gen.

Layers are plain dictionaries merged in priority order.
"""

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Merge rules:
    - Scalar values: override replaces base
    - Dicts: recursive deep merge
    - Lists: override replaces base
    - null/None value: remove key from result

    Args:
        base: Base dictionary.
        override: Override dictionary.

    Returns:
        Merged dictionary. Neither input is modified.

    Examples:
        >>> deep_merge({"wizard": {"default_mode": "basic"}}, {"wizard": {"username": "alice"}})
        {"wizard": {"default_mode": "basic", "username": "alice"}}
    """
    result = base.copy()

    for key, value in override.items():
        if value is None:
            result.pop(key, None)
        elif isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def set_nested_value(config: dict[str, Any], key_path: str, value: Any) -> dict[str, Any]:
    """
    Set a nested value in a dictionary.

    Creates intermediate dictionaries as needed.

    Args:
        config: Dictionary to modify.
        key_path: Dot-separated key path (e.g., "logging.level").
        value: Value to set.

    Returns:
        Modified dictionary.
    """
    keys = key_path.split(".")
    current = config

    for key in keys[:-1]:
        if key not in current or not isinstance(current[key], dict):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
    return config
