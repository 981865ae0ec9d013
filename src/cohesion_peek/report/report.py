"""Report: one metric computed and persisted as ``<name>.xml`` + ``<name>.html``."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from ..exceptions import CohesionPeekError, ComputationError
from ..logging_config import get_logger
from ..metrics import Metric, MetricResult
from .documents import metric_document, write_document
from .renderer import Renderer

logger = get_logger(__name__)


class Report:
    """Runs one metric and writes its standalone artifacts.

    ``save`` expects the output directory to exist. Write errors propagate
    unchanged; files written before a failure are left in place.
    """

    def __init__(self, metric: Metric, renderer: Renderer):
        self.metric = metric
        self.renderer = renderer

    @property
    def name(self) -> str:
        return self.metric.name

    def save(self, output: Path) -> Path:
        """Compute the metric and write both files; returns the XML path."""
        result = self._compute()
        document = metric_document(self.metric, result)

        xml_path = Path(output) / f"{self.name}.xml"
        write_document(document, xml_path)
        html_path = Path(output) / f"{self.name}.html"
        html_path.write_text(self.renderer.to_presentation(document, "metric"), encoding="utf-8")

        logger.debug(f"{self.name}: {len(result.scores)} classes written to {xml_path.name}")
        return xml_path

    def _compute(self) -> MetricResult:
        try:
            result = self.metric.compute()
        except CohesionPeekError:
            raise
        except Exception as e:
            raise ComputationError(self.name, f"{type(e).__name__}: {e}") from e
        self._check(result)
        return result

    def _check(self, result: MetricResult) -> None:
        """Every Base class must be scored exactly once, under this metric's name."""
        if result.metric != self.name:
            raise ComputationError(self.name, f"result is labelled {result.metric!r}")
        counts = Counter(result.names())
        duplicates = sorted(name for name, n in counts.items() if n > 1)
        if duplicates:
            raise ComputationError(self.name, f"classes scored twice: {', '.join(duplicates)}")
        expected = set(self.metric.base.names())
        missing = expected - set(counts)
        if missing:
            raise ComputationError(
                self.name,
                f"no score for {', '.join(sorted(missing)[:5])}",
                missing=len(missing),
            )
        unknown = set(counts) - expected
        if unknown:
            raise ComputationError(self.name, f"scores for unknown classes: {', '.join(sorted(unknown)[:5])}")
