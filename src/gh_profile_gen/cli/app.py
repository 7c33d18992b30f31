"""
Main Typer application for the gh-profile-gen CLI.

This module defines the root CLI application, loads settings and sets up
logging before any command runs.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from gh_profile_gen import __version__
from gh_profile_gen.cli.output import print_error, print_info, print_table, print_warning, print_yaml
from gh_profile_gen.config.profile import Meta, ProfileConfig
from gh_profile_gen.config.settings import LoggingSettings, SettingsError, WizardSettings, load_settings
from gh_profile_gen.wizard.core import Mode
from gh_profile_gen.wizard.steps import WizardStep

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Create the main Typer app
app = typer.Typer(
    name="gh-profile-gen",
    help="Build a GitHub profile README configuration with an interactive wizard.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"gh-profile-gen version [green]{__version__}[/green]")
        raise typer.Exit()


def configure_logging(settings: LoggingSettings) -> None:
    """
    Route log records according to settings.

    With a log file, records at the configured level go to that file. Without
    one, only warnings and errors reach stderr so the TUI is not disturbed.
    """
    level = getattr(logging, settings.level)
    if settings.file is not None:
        handler: logging.Handler = logging.FileHandler(settings.file, encoding="utf-8")
        handler.setLevel(level)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(max(level, logging.WARNING))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler], force=True)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    settings_file: Annotated[
        Path | None,
        typer.Option(
            "--settings",
            "-s",
            help="Read settings from this file instead of ~/.gh-profile-gen/settings.yaml.",
        ),
    ] = None,
) -> None:
    """
    [bold blue]gh-profile-gen[/bold blue] - GitHub profile README wizard

    Walks through twelve steps (identity, about, social links, skills, stats
    and more) and prints the collected profile configuration as YAML.
    """
    try:
        settings = load_settings(settings_file)
    except SettingsError as e:
        print_error(f"Settings error: {e}")
        raise typer.Exit(1)

    try:
        configure_logging(settings.logging)
    except OSError as e:
        print_error(f"Cannot open log file: {e}")
        raise typer.Exit(1)

    ctx.obj = settings


@app.command("wizard")
def wizard(
    ctx: typer.Context,
    mode: Annotated[
        Mode | None,
        typer.Option(
            "--mode",
            "-m",
            help="Start in basic or advanced mode. Defaults to the settings value.",
            case_sensitive=False,
        ),
    ] = None,
    plain: Annotated[
        bool,
        typer.Option(
            "--plain",
            help="Print YAML without syntax highlighting.",
        ),
    ] = False,
) -> None:
    """Run the interactive wizard and print the resulting configuration."""
    from gh_profile_gen.tui.app import run_profile_wizard

    settings: WizardSettings = ctx.obj or WizardSettings()
    start_mode = mode or Mode(settings.wizard.default_mode)
    seed = None
    if settings.wizard.username:
        seed = ProfileConfig(meta=Meta(username=settings.wizard.username))

    logger.info("Starting wizard in %s mode", start_mode.value)
    config = run_profile_wizard(start_mode, seed)

    if config is None:
        print_warning("Wizard cancelled. Nothing was generated.")
        raise typer.Exit()

    if not config.meta.username:
        print_warning("No GitHub username was entered.")

    print_yaml(config.to_dict(), highlight=not plain)


@app.command("steps")
def steps() -> None:
    """List the wizard steps in order."""
    rows = [[step.index + 1, step.label] for step in WizardStep.ordered()]
    print_table(["#", "Step"], rows, title="Wizard steps")


if __name__ == "__main__":
    app()
