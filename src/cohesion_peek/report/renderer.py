"""Presentation: XML documents to HTML views, and the score badge.

Templates are compiled once into a ``Templates`` struct and handed to the
``Renderer``; nothing here reads files after construction or keeps module
state, so tests can render from in-memory template strings.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Mapping

from jinja2 import BaseLoader, DictLoader, Environment, PackageLoader, StrictUndefined, Template

from ..exceptions import InvalidConfigError

TEMPLATE_FILES: dict[str, str] = {
    "index": "index.html.j2",
    "matrix": "matrix.html.j2",
    "metric": "metric.html.j2",
    "badge": "badge.svg.j2",
}

# Copied next to the generated artifacts for offline viewing.
STATIC_TEMPLATES: tuple[str, ...] = ("index", "matrix", "metric")

BADGE_STYLES = ("round", "flat")


def _environment(loader: BaseLoader) -> Environment:
    return Environment(
        loader=loader,
        autoescape=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


@dataclass(frozen=True)
class Templates:
    """Precompiled presentation templates keyed by template id."""

    compiled: Mapping[str, Template]
    sources: Mapping[str, str]

    @classmethod
    def load(cls) -> "Templates":
        """Compile the templates shipped in ``cohesion_peek/report/templates``."""
        return cls._build(PackageLoader("cohesion_peek.report", "templates"), TEMPLATE_FILES)

    @classmethod
    def from_strings(cls, **sources: str) -> "Templates":
        """Compile templates from strings, e.g. ``from_strings(index="...")``."""
        files = {template_id: f"{template_id}.j2" for template_id in sources}
        loader = DictLoader({files[k]: v for k, v in sources.items()})
        return cls._build(loader, files)

    @classmethod
    def _build(cls, loader: BaseLoader, files: Mapping[str, str]) -> "Templates":
        env = _environment(loader)
        compiled = {template_id: env.get_template(name) for template_id, name in files.items()}
        sources = {
            template_id: loader.get_source(env, name)[0] for template_id, name in files.items()
        }
        return cls(compiled=compiled, sources=sources)

    def get(self, template_id: str) -> Template:
        try:
            return self.compiled[template_id]
        except KeyError:
            raise InvalidConfigError(
                "template", template_id, f"known templates: {', '.join(sorted(self.compiled))}"
            )


def badge_color(score: float) -> str:
    if score >= 0.7:
        return "#44cc11"
    if score >= 0.4:
        return "#dfb317"
    return "#e05d44"


class Renderer:
    """Pure transforms from documents and scores to text."""

    def __init__(self, templates: Templates):
        self.templates = templates

    def to_presentation(self, document: ET.Element, template_id: str) -> str:
        """Render an XML document through one of the templates."""
        return self.templates.get(template_id).render(document=document)

    def badge(self, score: float, style: str = "round") -> str:
        """SVG scorecard showing ``score`` with four decimals."""
        if style not in BADGE_STYLES:
            raise InvalidConfigError("badge_style", style, "must be 'round' or 'flat'")
        return self.templates.get("badge").render(
            text=f"{score:.4f}",
            color=badge_color(score),
            radius=3 if style == "round" else 0,
        )
