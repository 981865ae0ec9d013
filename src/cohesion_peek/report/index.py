"""Index: one ``<metric>`` section per metric document, in metric order."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Sequence

from .. import __version__
from ..math import Statistics
from .documents import MetricSheet, format_value, load_sheets

COLORS = ("green", "yellow", "red")


class Index:
    """Aggregates the per-metric documents under ``output`` into ``<metrics>``.

    Each section carries the metric's own score (the mean of its measurable
    class values, or 0.0 when no class is measurable), summary counts and
    the per-class entries. The aggregate ``score`` attribute is added later
    by the Scorer.
    """

    def __init__(self, output: Path, names: Sequence[str]):
        self.output = Path(output)
        self.names = list(names)

    def value(self) -> ET.Element:
        root = ET.Element("metrics", {"version": __version__})
        for sheet in load_sheets(self.output, self.names):
            root.append(self._section(sheet))
        return root

    @staticmethod
    def _section(sheet: MetricSheet) -> ET.Element:
        defined = sheet.defined()
        section = ET.Element("metric", {"name": sheet.name})
        fields = [
            ("title", sheet.title),
            ("html", f"{sheet.name}.html"),
            ("xml", f"{sheet.name}.xml"),
            ("classes", str(len(sheet.entries))),
            ("elements", str(len(defined))),
            ("min", format_value(min(defined)) if defined else "NaN"),
            ("max", format_value(max(defined)) if defined else "NaN"),
        ]
        fields.extend((color, str(sheet.count(color))) for color in COLORS)
        fields.append(("score", format_value(Statistics.mean(defined)) if defined else "0.0"))
        fields.append(("reverse", "true" if sheet.reverse else "false"))
        for tag, text in fields:
            ET.SubElement(section, tag).text = text
        for entry in sheet.entries:
            ET.SubElement(
                section, "class", {"id": entry.id, "value": entry.value, "color": entry.color}
            )
        return section
