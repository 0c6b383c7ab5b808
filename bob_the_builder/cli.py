"""Bob CLI for building wasm contracts.

Provides commands to build the contract packages of a cargo project and
to preview what a build would produce.
"""

import logging
import sys
from pathlib import Path

import click

from .config.loader import load_config
from .errors import BuildError
from .orchestrator import Orchestrator

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def make_orchestrator(project_dir: Path, config_path: Path | None, log_level: str | None) -> Orchestrator:
    settings = load_config(config_path=config_path, project_dir=project_dir)
    configure_logging(log_level or settings.log_level)
    return Orchestrator(settings, project_dir=project_dir)


project_dir_option = click.option(
    "--project-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory holding the root Cargo.toml",
)
config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (default: bob.yaml in the project directory)",
)
log_level_option = click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Logging level (overrides configuration)",
)


@click.group()
def cli():
    """Bob - Build wasm contracts of a cargo project or workspace."""
    pass


@cli.command()
@project_dir_option
@config_option
@log_level_option
def build(project_dir: Path, config_path: Path | None, log_level: str | None):
    """Build every contract package and all its variants."""
    try:
        orchestrator = make_orchestrator(project_dir, config_path, log_level)
        artifacts = orchestrator.build()
    except BuildError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        import traceback

        click.echo(f"Unexpected error: {e}", err=True)
        click.echo("Traceback:", err=True)
        click.echo(traceback.format_exc(), err=True)
        sys.exit(1)

    if not artifacts:
        click.echo("Nothing to build")
        return

    click.echo(f"Built {len(artifacts)} artifact(s):")
    for artifact in artifacts:
        click.echo(f"  • {artifact}")


@cli.command()
@project_dir_option
@config_option
@log_level_option
def plan(project_dir: Path, config_path: Path | None, log_level: str | None):
    """Show the builds that would run, without running them."""
    try:
        orchestrator = make_orchestrator(project_dir, config_path, log_level or "warning")
        plans = orchestrator.plan()
    except BuildError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not plans:
        click.echo("Nothing to build")
        return

    for package_plan in plans:
        click.echo(f"{package_plan.name} ({package_plan.package_dir})")
        for step in package_plan.steps:
            label = f"variant {step.variant}" if step.variant else "default"
            click.echo(f"  {label:<20} -> {step.artifact}")


def main():
    """Entry point for bob CLI."""
    cli()


if __name__ == "__main__":
    main()
