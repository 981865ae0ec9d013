"""Metrics command -- list the registered cohesion metrics."""

from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table

from ..metrics import get_metric_type, get_metric_types
from . import app
from ._common import console


def _thresholds(metric) -> str:
    low, high = metric.colors
    if metric.reverse:
        return f"green <= {low:g}, red > {high:g}"
    return f"green >= {high:g}, red < {low:g}"


@app.command()
def metrics(
    name: Optional[str] = typer.Argument(
        None,
        help="Show details for one metric (e.g. LCOM2)",
    ),
):
    """
    List the cohesion metrics every analysis runs, in report order.
    """
    if name is not None:
        try:
            metric = get_metric_type(name)
        except KeyError:
            known = ", ".join(m.name for m in get_metric_types())
            console.print(f"[red]Error:[/red] unknown metric {name!r} (known: {known})")
            raise typer.Exit(1)
        console.print(
            Panel(
                f"{metric.description}\n\n"
                f"Better: {'lower' if metric.reverse else 'higher'}\n"
                f"Thresholds: {_thresholds(metric)}\n\n"
                f"{(metric.__doc__ or '').strip()}",
                title=f"[bold cyan]{metric.name}[/bold cyan]: {metric.title}",
                expand=False,
            )
        )
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Title")
    table.add_column("Better")
    table.add_column("Thresholds", justify="right")
    for metric in get_metric_types():
        low, high = metric.colors
        table.add_row(
            metric.name,
            metric.title,
            "lower" if metric.reverse else "higher",
            f"{low:g} / {high:g}",
        )
    console.print(table)
