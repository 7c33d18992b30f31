"""
Pytest configuration and fixtures for gh-profile-gen tests.
"""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from gh_profile_gen.config.profile import ProfileConfig
from gh_profile_gen.wizard.keys import KeyCode, KeyEvent, typed


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def app_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point GH_PROFILE_GEN_HOME at an empty temporary directory."""
    home = temp_dir / ".gh-profile-gen"
    home.mkdir()
    monkeypatch.setenv("GH_PROFILE_GEN_HOME", str(home))
    for name in ("GH_PROFILE_GEN_LOGGING__LEVEL", "GH_PROFILE_GEN_WIZARD__DEFAULT_MODE"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def press():
    """Feed key events to anything with a ``handle_key`` or ``process`` method."""

    def _press(target, *keys: KeyCode | str | KeyEvent) -> None:
        handler = getattr(target, "handle_key", None) or target.process
        for key in keys:
            if isinstance(key, KeyEvent):
                events = [key]
            elif isinstance(key, KeyCode):
                events = [KeyEvent.of(key)]
            else:
                events = typed(key)
            for event in events:
                handler(event)

    return _press


@pytest.fixture
def sample_profile() -> ProfileConfig:
    """Provide a partially filled profile config."""
    return ProfileConfig.model_validate(
        {
            "meta": {"username": "alice", "name": "Alice"},
            "about": {"role": "Engineer", "pronouns": "they/them"},
            "skills": {"languages": ["Rust", "Python"], "tools": ["Docker"]},
            "stats": {"stats_card": True, "theme": "tokyonight"},
        }
    )
