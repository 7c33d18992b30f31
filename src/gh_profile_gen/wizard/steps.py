"""
Wizard step sequence and step-level signals.

The twelve steps form one fixed linear order. Transitions never branch on
configuration content and never fail: stepping past either end returns the
same step.
"""

from enum import Enum, auto


class WizardStep(Enum):
    WELCOME = auto()
    IDENTITY = auto()
    ABOUT = auto()
    SOCIAL = auto()
    SKILLS = auto()
    STATS = auto()
    PROJECTS = auto()
    BLOG = auto()
    DYNAMIC = auto()
    EXTRAS = auto()
    LAYOUT = auto()
    PREVIEW_GENERATE = auto()

    @classmethod
    def ordered(cls) -> tuple["WizardStep", ...]:
        """All steps in wizard order."""
        return _STEP_ORDER

    @classmethod
    def first(cls) -> "WizardStep":
        return _STEP_ORDER[0]

    @classmethod
    def last(cls) -> "WizardStep":
        return _STEP_ORDER[-1]

    @property
    def index(self) -> int:
        """Zero-based position in the sequence."""
        return _STEP_INDEX[self]

    @property
    def label(self) -> str:
        """Human readable title shown by the host."""
        return _STEP_LABELS[self]

    @property
    def is_last(self) -> bool:
        return self is _STEP_ORDER[-1]

    def next(self) -> "WizardStep":
        """The following step, or this step if it is the last."""
        return _STEP_ORDER[min(self.index + 1, len(_STEP_ORDER) - 1)]

    def prev(self) -> "WizardStep":
        """The preceding step, or this step if it is the first."""
        return _STEP_ORDER[max(self.index - 1, 0)]


_STEP_ORDER: tuple[WizardStep, ...] = (
    WizardStep.WELCOME,
    WizardStep.IDENTITY,
    WizardStep.ABOUT,
    WizardStep.SOCIAL,
    WizardStep.SKILLS,
    WizardStep.STATS,
    WizardStep.PROJECTS,
    WizardStep.BLOG,
    WizardStep.DYNAMIC,
    WizardStep.EXTRAS,
    WizardStep.LAYOUT,
    WizardStep.PREVIEW_GENERATE,
)

_STEP_INDEX: dict[WizardStep, int] = {step: i for i, step in enumerate(_STEP_ORDER)}

_STEP_LABELS: dict[WizardStep, str] = {
    WizardStep.WELCOME: "Welcome",
    WizardStep.IDENTITY: "Identity",
    WizardStep.ABOUT: "About",
    WizardStep.SOCIAL: "Social Links",
    WizardStep.SKILLS: "Skills",
    WizardStep.STATS: "Stats",
    WizardStep.PROJECTS: "Projects",
    WizardStep.BLOG: "Blog & Content",
    WizardStep.DYNAMIC: "Dynamic",
    WizardStep.EXTRAS: "Extras",
    WizardStep.LAYOUT: "Layout",
    WizardStep.PREVIEW_GENERATE: "Preview & Generate",
}


class StepAction(Enum):
    """What the host loop should do after a key was handled by a step.

    CONTINUE means the key was already applied to the step's widgets.
    GENERATE ends the wizard with the current config from any step.
    """

    CONTINUE = auto()
    NEXT_STEP = auto()
    PREV_STEP = auto()
    GENERATE = auto()
    QUIT = auto()
