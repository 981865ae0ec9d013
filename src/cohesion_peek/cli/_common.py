"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    workers: Optional[int] = None,
    badge_style: Optional[str] = None,
    include_tests: Optional[bool] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    return load_config(
        config_file=config,
        workers=workers,
        badge_style=badge_style,
        include_tests=include_tests,
        verbose=verbose,
        quiet=quiet,
    )
