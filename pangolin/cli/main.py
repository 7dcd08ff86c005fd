"""Main CLI entry point for the Pangolin packer."""

import sys
from pathlib import Path
from typing import Optional
import typer
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from ..core.errors import PangolinError
from ..core.log import configure_logging, get_logger
from .commands.pack import pack


class GlobalCliOptions(BaseModel):
    """Global CLI options that can be used across all commands."""

    verbose: int = Field(0, description="Increase verbosity level")
    config_file: Optional[Path] = Field(None, description="Configuration file path")
    log_file: Optional[Path] = Field(None, description="JSON log file path")
    log_level: str = Field(
        "WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )


app = typer.Typer(
    name="pangolin",
    help="Test bundle packing for parallel test runners",
    no_args_is_help=True,
    rich_markup_mode="markdown",
)
app.command("pack")(pack)
console = Console()
logger = get_logger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="Increase verbosity level"
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR) - explicit level",
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file path"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also write structured JSON logs to this file"
    ),
) -> None:
    """Pangolin: distribute test suites across parallel workers."""
    if verbose > 0 and log_level is not None:
        console.print("[red]Error: Cannot specify both --verbose and --log-level[/red]")
        raise typer.Exit(1)

    if log_level is None:
        resolved_log_level = (
            "DEBUG" if verbose >= 2 else "INFO" if verbose == 1 else "WARNING"
        )
    else:
        resolved_log_level = log_level.upper()

    cli_options = GlobalCliOptions(
        verbose=verbose,
        config_file=config_file,
        log_file=log_file,
        log_level=resolved_log_level,
    )

    ctx.ensure_object(dict)
    ctx.obj["cli_options"] = cli_options

    configure_logging(
        level=cli_options.log_level,
        log_file=cli_options.log_file,
        enable_json=cli_options.log_file is not None,
        enable_console=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__

    table = Table(title="Pangolin Version Information")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")
    table.add_row("Pangolin", __version__)
    console.print(table)


@app.command()
def config(ctx: typer.Context) -> None:
    """Show current configuration."""
    from ..core.config import load_config

    cli_options = (ctx.obj or {}).get("cli_options")
    try:
        current_config = load_config(cli_options.config_file if cli_options else None)
    except PangolinError as e:
        logger.error("Could not load configuration: %s", e.message)
        console.print(f"[red]Error getting configuration: {escape(e.message)}[/red]")
        raise typer.Exit(1)

    packing = current_config.packing
    table = Table(title="Pangolin Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Strategy", packing.strategy.value)
    table.add_row("Bundles", str(packing.num_bundles))
    table.add_row(
        "Tests To Run",
        ", ".join(packing.test_cases_to_run) if packing.test_cases_to_run is not None else "all",
    )
    table.add_row("Tests To Skip", ", ".join(packing.test_cases_to_skip or []) or "-")
    table.add_row("No Split", ", ".join(packing.no_split) or "-")
    if packing.test_time_estimates_file:
        table.add_row("Time Estimates", str(packing.test_time_estimates_file))
    table.add_row("Log Level", current_config.log_level)
    console.print(table)


def cli_main() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    cli_main()
