"""Exception hierarchy for Cohesion Peek."""

from .analysis import (
    AggregationError,
    AnalysisError,
    ComputationError,
    ParsingError,
)
from .base import CohesionPeekError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    PreconditionError,
)

__all__ = [
    "CohesionPeekError",
    "AnalysisError",
    "ParsingError",
    "ComputationError",
    "AggregationError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "PreconditionError",
]
