"""Packing CLI command."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.config import load_config
from ...core.errors import ConfigurationError, PangolinError
from ...core.log import get_logger, log_context
from ...core.types import PackingConfig
from ...core.value_objects import ExecutionBundle
from ...packing import (
    assign_bundles,
    bundles_to_plan,
    load_manifest,
    pack_tests,
)
from ...packing.assignment import WorkerLoad, imbalance
from ...utils.codec import to_json_string
from ...utils.filesystem import atomic_write

console = Console()
logger = get_logger(__name__)

_HELP = {
    "manifest": "Suite manifest (JSON or YAML) produced by test discovery",
    "bundles": "Desired number of bundles (parallel workers)",
    "include": "Only run this test identifier (repeatable)",
    "skip": "Never run this test identifier (repeatable)",
    "no_split": "Never split the suite with this name (repeatable)",
    "estimates": "JSON file mapping test identifiers to estimated seconds",
    "output": "Write the packing plan as JSON to this file",
    "output_format": "Output format: rich, json",
    "workers": "Preview a greedy assignment onto this many workers",
}


def _resolve_packing_config(ctx: typer.Context, cli_values: Dict[str, Any]) -> PackingConfig:
    """Merge CLI values over the configured packing section."""
    cli_options = (ctx.obj or {}).get("cli_options")
    config_file = cli_options.config_file if cli_options else None
    base = load_config(config_file).packing
    # Repeatable options arrive as empty sequences when not given
    updates = {
        key: list(value) if isinstance(value, (list, tuple)) else value
        for key, value in cli_values.items()
        if value is not None and not (isinstance(value, (list, tuple)) and not value)
    }
    try:
        return PackingConfig(**{**base.model_dump(), **updates})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid packing options: {e}") from e


def pack(
    ctx: typer.Context,
    manifest: Path = typer.Argument(..., help=_HELP["manifest"]),
    bundles: Optional[int] = typer.Option(None, "--bundles", "-n", min=1, help=_HELP["bundles"]),
    include: Optional[List[str]] = typer.Option(None, "--include", "-i", help=_HELP["include"]),
    skip: Optional[List[str]] = typer.Option(None, "--skip", "-s", help=_HELP["skip"]),
    no_split: Optional[List[str]] = typer.Option(None, "--no-split", help=_HELP["no_split"]),
    estimates: Optional[Path] = typer.Option(None, "--estimates", "-e", help=_HELP["estimates"]),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help=_HELP["output"]),
    output_format: str = typer.Option("rich", "--format", help=_HELP["output_format"]),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help=_HELP["workers"]),
) -> None:
    """Pack the suites of a manifest into execution bundles."""
    if output_format not in ("rich", "json"):
        console.print(f"[red]Unknown format: {escape(output_format)}[/red]")
        raise typer.Exit(1)

    with log_context(manifest=str(manifest)):
        try:
            config = _resolve_packing_config(
                ctx,
                {
                    "num_bundles": bundles,
                    "test_cases_to_run": include,
                    "test_cases_to_skip": skip,
                    "no_split": no_split,
                    "test_time_estimates_file": estimates,
                },
            )
            suites = load_manifest(manifest)
            result = pack_tests(suites, config)
            plan = bundles_to_plan(result, config.strategy)
            loads = assign_bundles(result, workers) if workers is not None else None
            if loads is not None:
                plan["assignment"] = _assignment_to_plan(result, loads)
            if output is not None:
                atomic_write(output, to_json_string(plan))
        except PangolinError as e:
            logger.error("Packing failed: %s", e.message)
            console.print(f"[red]Packing failed: {escape(e.message)}[/red]")
            raise typer.Exit(1)

    if output_format == "json":
        # The assignment is part of the document; stdout stays a single JSON value
        typer.echo(to_json_string(plan))
        return

    _display_bundles(result)
    if output is not None:
        console.print(f"Plan written to [cyan]{output}[/cyan]")
    if loads is not None:
        _display_assignment(loads)


def _display_bundles(bundles: Sequence[ExecutionBundle]) -> None:
    table = Table(title=f"Execution Bundles ({len(bundles)})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Suite", style="cyan")
    table.add_column("Tests", justify="right", style="green")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Estimate", justify="right", style="magenta")
    for index, bundle in enumerate(bundles):
        estimate = bundle.estimated_execution_time
        table.add_row(
            str(index),
            bundle.name,
            str(len(bundle.tests_to_run)),
            str(len(bundle.skip_test_identifiers)),
            f"{estimate:.2f}s" if estimate is not None else "-",
        )
    console.print(table)


def _assignment_to_plan(
    bundles: Sequence[ExecutionBundle], loads: Sequence[WorkerLoad]
) -> Dict[str, Any]:
    """Worker loads with bundles referenced by their position in the plan."""
    positions = {id(bundle): index for index, bundle in enumerate(bundles)}
    return {
        "workers": [
            {
                "worker": worker.worker,
                "bundles": [positions[id(bundle)] for bundle in worker.bundles],
                "load": worker.load,
            }
            for worker in loads
        ],
        "imbalance": imbalance(loads),
    }


def _display_assignment(loads: Sequence[WorkerLoad]) -> None:
    table = Table(title=f"Greedy Assignment onto {len(loads)} Workers")
    table.add_column("Worker", justify="right", style="cyan")
    table.add_column("Bundles", justify="right")
    table.add_column("Load", justify="right", style="green")
    for worker in loads:
        table.add_row(str(worker.worker), str(len(worker.bundles)), f"{worker.load:.2f}")
    console.print(table)
    console.print(f"Imbalance (max / mean): {imbalance(loads):.2f}")
