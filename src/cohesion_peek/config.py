"""Configuration loading and management for Cohesion Peek.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Project config (./cohesion-peek.toml)
    3. Explicit config file
    4. CLI overrides (passed as kwargs)

The set of metrics is fixed by the registry and is not a configuration key.

Example:
    >>> config = load_config(verbose=True, workers=4)
    >>> config.verbosity
    'verbose'
    >>> config.workers
    4
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional

from .exceptions import CohesionPeekError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
BadgeStyle = Literal["round", "flat"]

PROJECT_CONFIG_NAME = "cohesion-peek.toml"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        Source filtering:
            exclude_patterns: Glob patterns (relative POSIX paths) to skip
            include_tests: Analyze test modules (test_*.py, *_test.py, conftest.py)
            max_file_size_mb: Maximum source file size to parse (MB)
            max_files: Maximum number of source files to parse

        Execution:
            workers: Metric workers; 1 runs reports sequentially

        Output:
            badge_style: Visual style of badge.svg
            verbosity: Logging verbosity level
    """

    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            ".git/*",
            "venv/*",
            ".venv/*",
            "__pycache__/*",
            ".tox/*",
            ".mypy_cache/*",
            ".pytest_cache/*",
            "build/*",
            "dist/*",
            "*.egg-info/*",
            "node_modules/*",
        ]
    )
    include_tests: bool = False
    max_file_size_mb: float = 10.0
    max_files: int = 10000

    workers: int = 1

    badge_style: BadgeStyle = "round"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError(
                "max_file_size_mb", self.max_file_size_mb, "must be positive"
            )
        if self.max_files < 1:
            raise InvalidConfigError("max_files", self.max_files, "must be at least 1")
        if self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.badge_style not in ("round", "flat"):
            raise InvalidConfigError(
                "badge_style", self.badge_style, "must be 'round' or 'flat'"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be quiet, normal or verbose"
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        CohesionPeekError: If a config file is missing or cannot be parsed
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_section(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise CohesionPeekError(f"Config file not found: {config_file}")
        merged.update(_load_section(config_file))

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise CohesionPeekError(f"Invalid configuration: {e}")


def _load_section(path: Path) -> dict:
    """Load a TOML file, returning its ``[cohesion-peek]`` table if present."""
    try:
        data = _load_toml_file(path)
    except CohesionPeekError:
        raise
    except Exception as e:
        raise CohesionPeekError(f"Invalid config file '{path}': {e}")
    section = data.get("cohesion-peek", data)
    if not isinstance(section, dict):
        raise CohesionPeekError(f"Invalid config file '{path}': [cohesion-peek] must be a table")
    return dict(section)


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        CohesionPeekError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise CohesionPeekError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
