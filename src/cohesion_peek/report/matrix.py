"""Matrix: the per-metric documents pivoted into one row per class."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Sequence

from .documents import SheetEntry, load_sheets


class Matrix:
    """Builds ``<matrix>`` from the same on-disk documents as the Index.

    Rows are classes sorted by id; each row holds one ``<cohesion>`` cell
    per metric, in metric order, quoting the document's value verbatim.
    """

    def __init__(self, output: Path, names: Sequence[str]):
        self.output = Path(output)
        self.names = list(names)

    def value(self) -> ET.Element:
        sheets = load_sheets(self.output, self.names)
        root = ET.Element("matrix")
        header = ET.SubElement(root, "metrics")
        rows: Dict[str, Dict[str, SheetEntry]] = {}
        packages: Dict[str, str] = {}
        for sheet in sheets:
            ET.SubElement(
                header,
                "metric",
                {
                    "name": sheet.name,
                    "title": sheet.title,
                    "reverse": "true" if sheet.reverse else "false",
                },
            )
            for entry in sheet.entries:
                rows.setdefault(entry.id, {})[sheet.name] = entry
                packages.setdefault(entry.id, entry.package)

        classes = ET.SubElement(root, "classes")
        for class_id in sorted(rows):
            row = ET.SubElement(classes, "class", {"id": class_id, "package": packages[class_id]})
            for sheet in sheets:
                entry = rows[class_id].get(sheet.name)
                if entry is None:
                    continue
                ET.SubElement(
                    row,
                    "cohesion",
                    {"metric": sheet.name, "value": entry.value, "color": entry.color},
                )
        return root
