"""Per-metric XML documents: the on-disk contract between Report and Index/Matrix.

Report writes one ``<name>.xml`` per metric. Index and Matrix never see a
``MetricResult``; they read these files back into ``MetricSheet`` objects,
so either view can be rebuilt from an output directory alone.

Values are written as ``repr(float)`` (or ``NaN``) and carried as text all
the way into the index and matrix, so both views quote identical strings.
"""

from __future__ import annotations

import copy
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from ..exceptions import AggregationError
from ..math import Statistics
from ..metrics import Metric, MetricResult

NAN_TEXT = "NaN"


def format_value(value: float) -> str:
    """Deterministic text form of a score."""
    value = float(value)
    if math.isnan(value):
        return NAN_TEXT
    return repr(value)


def parse_value(text: str) -> float:
    """Inverse of ``format_value``; raises ValueError on malformed text."""
    if text == NAN_TEXT:
        return float("nan")
    return float(text)


def _format_variable(value) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return format_value(value)


def metric_document(metric: Metric, result: MetricResult) -> ET.Element:
    """Serialize one metric's result into a ``<metric>`` element.

    Classes are ordered by qualified name regardless of result order.
    """
    root = ET.Element("metric", {"name": result.metric, "reverse": _bool(metric.reverse)})
    ET.SubElement(root, "title").text = metric.title
    ET.SubElement(root, "description").text = metric.description
    low, high = metric.colors
    ET.SubElement(root, "colors", {"low": format_value(low), "high": format_value(high)})
    classes = ET.SubElement(root, "classes")
    for score in sorted(result.scores, key=lambda s: s.name):
        node = ET.SubElement(
            classes,
            "class",
            {
                "id": score.name,
                "package": score.name.rpartition(".")[0],
                "path": score.path,
                "value": format_value(score.value),
                "color": metric.color(score.value),
            },
        )
        if score.variables:
            variables = ET.SubElement(node, "vars")
            for key in sorted(score.variables):
                ET.SubElement(variables, "var", {"id": key}).text = _format_variable(
                    score.variables[key]
                )
    return root


def to_bytes(element: ET.Element) -> bytes:
    """Serialize with an XML declaration and stable indentation.

    The element itself is left untouched.
    """
    tree = copy.deepcopy(element)
    ET.indent(tree)
    return ET.tostring(tree, encoding="utf-8", xml_declaration=True) + b"\n"


def write_document(element: ET.Element, path: Path) -> None:
    path.write_bytes(to_bytes(element))


def _bool(flag: bool) -> str:
    return "true" if flag else "false"


@dataclass(frozen=True)
class SheetEntry:
    """One class row of a metric document, value kept as written."""

    id: str
    value: str
    color: str
    package: str = ""

    @property
    def number(self) -> float:
        return parse_value(self.value)


@dataclass(frozen=True)
class MetricSheet:
    """A metric document read back from disk."""

    name: str
    title: str
    reverse: bool
    entries: tuple[SheetEntry, ...]

    def defined(self) -> list[float]:
        """Numeric values of the classes the metric could measure."""
        return Statistics.defined(e.number for e in self.entries)

    def count(self, color: str) -> int:
        return sum(1 for e in self.entries if e.color == color)


def read_metric_sheet(path: Path, name: str) -> MetricSheet:
    """Parse ``<name>.xml``; any structural problem is an AggregationError."""
    if not path.is_file():
        raise AggregationError(f"metric document for {name} is missing", source=path)
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise AggregationError(f"metric document is not valid XML: {e}", source=path)

    if root.tag != "metric":
        raise AggregationError(f"unexpected root element <{root.tag}>", source=path)
    if root.get("name") != name:
        raise AggregationError(
            f"document names metric {root.get('name')!r}, expected {name!r}", source=path
        )

    entries = []
    for node in root.iterfind("classes/class"):
        class_id = node.get("id")
        value = node.get("value")
        if not class_id or value is None:
            raise AggregationError("class entry without id or value", source=path)
        try:
            parse_value(value)
        except ValueError:
            raise AggregationError(f"value {value!r} of {class_id} is not a number", source=path)
        entries.append(
            SheetEntry(
                id=class_id,
                value=value,
                color=node.get("color", "gray"),
                package=node.get("package", ""),
            )
        )

    return MetricSheet(
        name=name,
        title=root.findtext("title", default=name),
        reverse=root.get("reverse") == "true",
        entries=tuple(entries),
    )


def load_sheets(output: Path, names: Iterable[str]) -> list[MetricSheet]:
    """Read every metric document in ``names`` order."""
    return [read_metric_sheet(output / f"{name}.xml", name) for name in names]
