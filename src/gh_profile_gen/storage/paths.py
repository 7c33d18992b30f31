"""
Path utilities for gh-profile-gen.

Provides consistent path resolution for application settings.
"""

import os
from pathlib import Path


def get_app_home() -> Path:
    """
    Get the gh-profile-gen home directory.

    Resolution order:
    1. GH_PROFILE_GEN_HOME environment variable
    2. Default: ~/.gh-profile-gen

    Returns:
        Path to the application home directory.
    """
    env_home = os.environ.get("GH_PROFILE_GEN_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".gh-profile-gen"


def get_settings_path() -> Path:
    """
    Get the path to the settings file.

    Returns:
        Path to ~/.gh-profile-gen/settings.yaml
    """
    return get_app_home() / "settings.yaml"
