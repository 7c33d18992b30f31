"""
Core state for the profile wizard.

``WizardState`` ties together the current step, the Basic/Advanced mode and
the ``ProfileConfig`` being built. It is UI-agnostic: deciding which widget
values end up in which config fields is the job of ``wizard.forms``.
"""

import logging
from enum import Enum

from gh_profile_gen.config.profile import ProfileConfig
from gh_profile_gen.wizard.exceptions import StateConsumedError
from gh_profile_gen.wizard.steps import WizardStep

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """Wizard interaction mode. Advanced shows the optional extra fields."""

    BASIC = "basic"
    ADVANCED = "advanced"


class WizardState:
    """
    Current step, mode and config for one wizard run.

    The state owns its config exclusively until ``build_config()`` hands it
    over. After that every method raises ``StateConsumedError``.
    """

    def __init__(self, mode: Mode = Mode.BASIC, config: ProfileConfig | None = None):
        self._step = WizardStep.first()
        self._mode = Mode(mode)
        self._config: ProfileConfig | None = config if config is not None else ProfileConfig()
        self._consumed = False

    def __repr__(self) -> str:
        status = "consumed" if self._consumed else self._step.name
        return f"WizardState(step={status}, mode={self._mode.value})"

    def _check(self, operation: str) -> None:
        if self._consumed:
            raise StateConsumedError(operation)

    @property
    def current_step(self) -> WizardStep:
        self._check("current_step")
        return self._step

    @property
    def mode(self) -> Mode:
        self._check("mode")
        return self._mode

    @property
    def config(self) -> ProfileConfig:
        """The config under construction. Mutate it in place to record values."""
        self._check("config")
        assert self._config is not None
        return self._config

    @property
    def is_consumed(self) -> bool:
        return self._consumed

    def set_mode(self, mode: Mode) -> None:
        """Switch between Basic and Advanced without touching step or config."""
        self._check("set_mode")
        mode = Mode(mode)
        if mode != self._mode:
            logger.debug("Wizard mode %s -> %s", self._mode.value, mode.value)
        self._mode = mode

    def next_step(self) -> WizardStep:
        self._check("next_step")
        previous, self._step = self._step, self._step.next()
        if previous is not self._step:
            logger.debug("Step %s -> %s", previous.name, self._step.name)
        return self._step

    def prev_step(self) -> WizardStep:
        self._check("prev_step")
        previous, self._step = self._step, self._step.prev()
        if previous is not self._step:
            logger.debug("Step %s -> %s", previous.name, self._step.name)
        return self._step

    def build_config(self) -> ProfileConfig:
        """
        Hand over the finished config.

        Returns:
            The ProfileConfig built so far.

        Raises:
            StateConsumedError: If the config was already extracted.
        """
        self._check("build_config")
        config, self._config = self._config, None
        self._consumed = True
        assert config is not None
        logger.debug("Config extracted at step %s", self._step.name)
        return config
