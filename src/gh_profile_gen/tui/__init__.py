"""
gh-profile-gen TUI (Terminal User Interface).

Built with the Textual framework.
"""

from gh_profile_gen.tui.app import ProfileWizardApp, run_profile_wizard
from gh_profile_gen.tui.keymap import translate_key

__all__ = ["ProfileWizardApp", "run_profile_wizard", "translate_key"]
