"""Analysis-related exceptions: parsing, metric computation, aggregation."""

from pathlib import Path
from typing import Any, Dict, Optional

from .base import CohesionPeekError


class AnalysisError(CohesionPeekError):
    """Base class for analysis-related errors."""
    pass


class ParsingError(AnalysisError):
    """Raised when a source file cannot be parsed into class skeletons."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Failed to parse file: {filepath}",
            details={"filepath": filepath, "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ComputationError(AnalysisError):
    """Raised when a metric fails to produce a result for the full class set."""

    def __init__(self, metric: str, reason: str, missing: Optional[int] = None):
        details: Dict[str, Any] = {"metric": metric, "reason": reason}
        if missing is not None:
            details["missing"] = missing

        super().__init__(f"Metric {metric} failed", details=details)
        self.metric = metric
        self.reason = reason
        self.missing = missing


class AggregationError(AnalysisError):
    """Raised when a score node is missing, malformed or undefined.

    Signals an internal inconsistency between the per-metric documents and
    the index built from them, not a user error.
    """

    def __init__(self, reason: str, source: Optional[Path] = None):
        details: Dict[str, Any] = {"reason": reason}
        if source is not None:
            details["source"] = source

        super().__init__(f"Cannot aggregate scores: {reason}", details=details)
        self.reason = reason
        self.source = source
