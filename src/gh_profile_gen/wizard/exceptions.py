"""
Exceptions for the wizard core.

User input never raises; these cover misuse of the API by calling code.
"""


class WizardError(Exception):
    """Base exception for wizard errors."""

    pass


class StateConsumedError(WizardError):
    """Raised when a WizardState is used after its config was extracted."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot call {operation}() after build_config()")
