"""
Storage helpers for gh-profile-gen.
"""

from gh_profile_gen.storage.paths import get_app_home, get_settings_path

__all__ = [
    "get_app_home",
    "get_settings_path",
]
