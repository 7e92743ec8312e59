"""Main Typer application — imports and registers all CLI commands.

Entry point: ``sbximages`` (configured via pyproject.toml scripts).

Commands: manifest, validate, print-config, show.
"""

from __future__ import annotations

import logging

import typer

from sbximages.cli.commands.manifest import manifest_cmd
from sbximages.cli.commands.print_config import print_config_cmd
from sbximages.cli.commands.show import show_cmd
from sbximages.cli.commands.validate import validate_cmd
from sbximages.config import settings

LOG_FORMAT = "[%(levelname)s] %(message)s"

app = typer.Typer(
    name="sbximages",
    help="Release tooling for SBX Firecracker kernel and rootfs images.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        settings.log_level,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Configure logging before any subcommand runs."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"unknown log level: {log_level}", param_hint="--log-level")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("sbximages").setLevel(level)


# Register subcommands
app.command(name="manifest", help="Generate manifest.json from config.yaml and built artifacts.")(manifest_cmd)
app.command(name="validate", help="Validate config.yaml (all fields required).")(validate_cmd)
app.command(name="print-config", help="Print extracted configuration values.")(print_config_cmd)
app.command(name="show", help="Show the artifacts recorded in a manifest.json.")(show_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
