"""
Profile wizard core.

Widgets, the step sequence and the wizard state are UI-agnostic; the
``tui`` package only translates keys and draws what these objects report.
"""

from gh_profile_gen.wizard.core import Mode, WizardState
from gh_profile_gen.wizard.exceptions import StateConsumedError, WizardError
from gh_profile_gen.wizard.forms import STEP_FORMS, StepForm, build_form, handle_step_key
from gh_profile_gen.wizard.keys import KeyCode, KeyEvent
from gh_profile_gen.wizard.session import WizardSession
from gh_profile_gen.wizard.steps import StepAction, WizardStep
from gh_profile_gen.wizard.widgets import (
    DynamicList,
    EntryMode,
    ListItem,
    ListMode,
    PairedField,
    PairedList,
    SearchableList,
    SingleSelect,
    TextBuffer,
    Toggle,
)

__all__ = [
    # State
    "Mode",
    "WizardState",
    "WizardSession",
    "WizardStep",
    "StepAction",
    # Forms
    "STEP_FORMS",
    "StepForm",
    "build_form",
    "handle_step_key",
    # Keys
    "KeyCode",
    "KeyEvent",
    # Widgets
    "TextBuffer",
    "Toggle",
    "SingleSelect",
    "SearchableList",
    "ListItem",
    "ListMode",
    "DynamicList",
    "EntryMode",
    "PairedList",
    "PairedField",
    # Exceptions
    "WizardError",
    "StateConsumedError",
]
