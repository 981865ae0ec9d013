"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="cohesion-peek",
    help="Cohesion Peek - class cohesion reports for Python codebases",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        is_eager=True,
    ),
):
    """
    Measure class cohesion and write HTML/XML reports with a score badge.
    """
    if version:
        console.print(
            f"[bold cyan]Cohesion Peek[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .metrics import metrics as _metrics  # noqa: F401, E402
