"""Base: the source of analyzable classes for every metric."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..logging_config import get_logger
from .models import ClassSkeleton

logger = get_logger(__name__)


class Base(ABC):
    """Immutable snapshot of the classes in a project.

    Subclasses implement ``_collect``; the snapshot is taken once, on first
    access, and returned unchanged afterwards so all metrics in a run see
    exactly the same targets.

    Qualified names are unique in the snapshot. When ``_collect`` yields a
    name twice (a class redefined in one module, ``pkg.py`` next to
    ``pkg/__init__.py``), the later definition replaces the earlier one, as
    the second ``class`` statement would at import time.
    """

    def __init__(self) -> None:
        self._targets: Optional[tuple[ClassSkeleton, ...]] = None

    def targets(self) -> tuple[ClassSkeleton, ...]:
        """Return all analyzable classes, sorted by qualified name."""
        if self._targets is None:
            unique: Dict[str, ClassSkeleton] = {}
            for skeleton in self._collect():
                shadowed = unique.get(skeleton.name)
                if shadowed is not None:
                    logger.warning(
                        f"Class {skeleton.name} is defined again in {skeleton.path or '?'}; "
                        f"ignoring the definition in {shadowed.path or '?'}"
                    )
                unique[skeleton.name] = skeleton
            self._targets = tuple(sorted(unique.values(), key=lambda c: c.name))
        return self._targets

    def names(self) -> list[str]:
        return [target.name for target in self.targets()]

    @abstractmethod
    def _collect(self) -> list[ClassSkeleton]:
        """Extract class skeletons from the underlying project."""
        ...
