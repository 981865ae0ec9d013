"""Application: runs every metric and assembles the report bundle.

The run is a straight line with no retries:

    preflight -> metrics -> index -> score -> index artifacts
              -> matrix -> matrix artifacts -> badge -> static templates

Any failure aborts the run and leaves whatever was already written in place.
Refusing an existing output location is the only guard against mixing runs;
it does not protect two processes racing to create the same directory.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Type, Union

from .config import AnalysisConfig
from .exceptions import InvalidPathError, PreconditionError
from .logging_config import get_logger
from .metrics import Metric, build_metrics, get_metric_types, validate_metric_types
from .report import STATIC_TEMPLATES, TEMPLATE_FILES, Index, Matrix, Renderer, Report, Scorer, Templates
from .report.documents import write_document
from .scanning import Base, PythonBase

logger = get_logger(__name__)


class App:
    """Analyze the classes under ``source`` and write reports to ``target``.

    There is no thread-safety guarantee across instances sharing a target.
    """

    def __init__(
        self,
        source: Union[str, Path],
        target: Union[str, Path],
        config: Optional[AnalysisConfig] = None,
        metric_types: Optional[Sequence[Type[Metric]]] = None,
        templates: Optional[Templates] = None,
        base: Optional[Base] = None,
    ):
        self.input = Path(source)
        self.output = Path(target)
        self.config = config or AnalysisConfig()
        self.metric_types = list(get_metric_types() if metric_types is None else metric_types)
        self.templates = templates
        self.base = base

    def analyze(self) -> float:
        """Run the whole pipeline; returns the aggregate score."""
        self._preflight()
        renderer = Renderer(self.templates or Templates.load())

        self.output.mkdir(parents=True)
        base = self.base or PythonBase(self.input, self.config)
        targets = base.targets()
        logger.info(f"Analyzing {len(targets)} classes from {self.input}")

        metrics = build_metrics(base, self.metric_types)
        self._run_reports([Report(metric, renderer) for metric in metrics])
        names = [metric.name for metric in metrics]

        index = Index(self.output, names).value()
        score = Scorer.score(index)
        index = Scorer.stamp(index, score)
        logger.info(f"Aggregate score: {score:.4f}")
        write_document(index, self.output / "index.xml")
        self._write("index.html", renderer.to_presentation(index, "index"))

        matrix = Matrix(self.output, names).value()
        write_document(matrix, self.output / "matrix.xml")
        self._write("matrix.html", renderer.to_presentation(matrix, "matrix"))

        self._write("badge.svg", renderer.badge(score, style=self.config.badge_style))

        for template_id in STATIC_TEMPLATES:
            self._write(TEMPLATE_FILES[template_id], renderer.templates.sources[template_id])

        logger.info(f"Report written to {self.output}")
        return score

    def _preflight(self) -> None:
        if self.output.exists():
            raise PreconditionError(self.output.absolute())
        if self.base is None and not self.input.is_dir():
            raise InvalidPathError(self.input, "source must be an existing directory")
        validate_metric_types(self.metric_types)

    def _run_reports(self, reports: List[Report]) -> None:
        """Save every report; all of them finish before aggregation starts."""
        workers = min(self.config.workers, len(reports))
        if workers <= 1:
            for report in reports:
                logger.debug(f"Running {report.name}")
                report.save(self.output)
            return

        logger.debug(f"Running {len(reports)} metrics on {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(report.save, self.output) for report in reports]
            for future in futures:
                future.result()

    def _write(self, name: str, text: str) -> None:
        (self.output / name).write_text(text, encoding="utf-8")
