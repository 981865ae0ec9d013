"""Root of the Cohesion Peek exception hierarchy."""

from typing import Any, Dict, Optional


class CohesionPeekError(Exception):
    """Any failure the CLI reports as ``Error: ...`` with exit code 1.

    ``details`` values are stored as text, in insertion order, so the
    message printed by the CLI is stable across runs.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} ({', '.join(f'{k}={v}' for k, v in self.details.items())})"
