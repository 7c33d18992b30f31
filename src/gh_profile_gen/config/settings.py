"""
Application settings for gh-profile-gen.

Loads and merges settings from multiple sources:
1. Default values
2. Settings file (~/.gh-profile-gen/settings.yaml)
3. Environment variables (GH_PROFILE_GEN_<SECTION>__<KEY>)

These settings tune the wizard itself. They are not the profile record.
"""

import logging
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from gh_profile_gen.config.merger import deep_merge, set_nested_value
from gh_profile_gen.storage.paths import get_settings_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "GH_PROFILE_GEN_"


class SettingsError(Exception):
    """Raised when settings loading or validation fails."""

    pass


# =============================================================================
# Schema
# =============================================================================


class WizardDefaults(BaseModel):
    """Starting values for a wizard run."""

    model_config = ConfigDict(extra="forbid")

    default_mode: Literal["basic", "advanced"] = "basic"
    username: str | None = None


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class WizardSettings(BaseModel):
    """Root settings model."""

    model_config = ConfigDict(extra="forbid")

    wizard: WizardDefaults = Field(default_factory=WizardDefaults)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# =============================================================================
# Loading
# =============================================================================


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML settings file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed dictionary, empty if the file does not exist.

    Raises:
        SettingsError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise SettingsError(f"Expected a mapping at the top of {path}")
    return content


def apply_env_overrides(settings: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides.

    ``GH_PROFILE_GEN_LOGGING__LEVEL=DEBUG`` sets ``logging.level``. A double
    underscore separates nesting levels so keys may contain single underscores.
    ``GH_PROFILE_GEN_HOME`` selects the settings directory and is skipped.

    Args:
        settings: Settings dictionary to modify.

    Returns:
        Settings with environment overrides applied.
    """
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX) or key == f"{ENV_PREFIX}HOME":
            continue

        key_path = key[len(ENV_PREFIX) :].lower().replace("__", ".")
        settings = set_nested_value(settings, key_path, value)
        logger.debug("Settings override from %s", key)

    return settings


def load_settings(path: Path | None = None, skip_env: bool = False) -> WizardSettings:
    """
    Load and merge settings from all sources.

    Args:
        path: Settings file to read. Defaults to the file under the app home.
        skip_env: Skip environment variable overrides.

    Returns:
        Validated WizardSettings.

    Raises:
        SettingsError: If the file is unreadable or the merged settings are invalid.
    """
    settings_dict = WizardSettings().model_dump(mode="json")

    settings_path = path or get_settings_path()
    if settings_path.exists():
        logger.debug("Loading settings from %s", settings_path)
        settings_dict = deep_merge(settings_dict, load_yaml_file(settings_path))

    if not skip_env:
        settings_dict = apply_env_overrides(settings_dict)

    try:
        return WizardSettings.model_validate(settings_dict)
    except ValidationError as e:
        raise SettingsError(f"Settings validation failed: {e}") from e
