"""
Configuration for gh-profile-gen.

Two separate concerns live here: the profile record the wizard builds
(``profile``) and the settings that tune the wizard itself (``settings``).
"""

from gh_profile_gen.config.merger import deep_merge, set_nested_value
from gh_profile_gen.config.profile import (
    About,
    Article,
    Blog,
    CollapsibleSection,
    Dynamic,
    Extras,
    Header,
    HeaderStyle,
    Layout,
    Meta,
    ProfileConfig,
    ProjectDisplay,
    Projects,
    Skills,
    Social,
    Sponsors,
    Stats,
    Template,
)
from gh_profile_gen.config.settings import (
    LoggingSettings,
    SettingsError,
    WizardDefaults,
    WizardSettings,
    apply_env_overrides,
    load_settings,
    load_yaml_file,
)

__all__ = [
    # Profile record
    "About",
    "Article",
    "Blog",
    "CollapsibleSection",
    "Dynamic",
    "Extras",
    "Header",
    "HeaderStyle",
    "Layout",
    "Meta",
    "ProfileConfig",
    "ProjectDisplay",
    "Projects",
    "Skills",
    "Social",
    "Sponsors",
    "Stats",
    "Template",
    # Settings
    "LoggingSettings",
    "SettingsError",
    "WizardDefaults",
    "WizardSettings",
    "apply_env_overrides",
    "load_settings",
    "load_yaml_file",
    # Merging
    "deep_merge",
    "set_nested_value",
]
