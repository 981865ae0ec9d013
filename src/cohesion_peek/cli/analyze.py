"""Analyze command -- run every metric and write the report directory."""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..app import App
from ..exceptions import CohesionPeekError
from ..logging_config import setup_logging
from . import app
from ._common import console, resolve_config


def _summary_table(index_path: Path) -> Table:
    """Per-metric scores as recorded in index.xml."""
    root = ET.parse(index_path).getroot()
    table = Table(title="Cohesion", show_header=True, header_style="bold")
    table.add_column("Metric", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Classes", justify="right")
    table.add_column("Green", justify="right", style="green")
    table.add_column("Yellow", justify="right", style="yellow")
    table.add_column("Red", justify="right", style="red")
    for metric in root.findall("metric"):
        table.add_row(
            metric.get("name", ""),
            f"{float(metric.findtext('score', '0')):.4f}",
            metric.findtext("classes", ""),
            metric.findtext("green", ""),
            metric.findtext("yellow", ""),
            metric.findtext("red", ""),
        )
    return table


@app.command()
def analyze(
    source: Path = typer.Argument(
        ...,
        help="Project directory to analyze",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    target: Path = typer.Argument(
        ...,
        help="Report directory to create (must not exist)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Run metrics on this many threads",
        min=1,
        max=32,
    ),
    badge_style: Optional[str] = typer.Option(
        None,
        "--badge-style",
        help="Badge look: round or flat",
    ),
    include_tests: Optional[bool] = typer.Option(
        None,
        "--tests/--no-tests",
        help="Include test modules in the analysis",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append a DEBUG log of the run to this file",
        dir_okay=False,
    ),
):
    """
    Measure every class under SOURCE and write the reports into TARGET.

    TARGET gets one XML/HTML pair per metric, index.xml/html,
    matrix.xml/html, badge.svg and the presentation templates.

    [bold cyan]Examples:[/bold cyan]

      cohesion-peek analyze src/ cohesion-report

      cohesion-peek analyze . /tmp/report --workers 4 --badge-style flat
    """
    try:
        settings = resolve_config(
            config=config,
            workers=workers,
            badge_style=badge_style,
            include_tests=include_tests,
            verbose=verbose,
            quiet=quiet,
        )
    except CohesionPeekError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    logger = setup_logging(settings.verbosity, log_file=log_file)

    try:
        score = App(source, target, config=settings).analyze()
    except CohesionPeekError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except OSError as e:
        logger.debug("Report generation failed", exc_info=True)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if settings.verbosity != "quiet":
        console.print(_summary_table(target / "index.xml"))
    console.print(
        f"\nScore [bold]{score:.4f}[/bold], report saved to: [bold green]{target}[/bold green]"
    )
