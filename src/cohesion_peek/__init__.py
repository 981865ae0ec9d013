"""
Cohesion Peek - class cohesion reports for Python codebases

Runs a fixed set of cohesion metrics (CAMC, LCOM, OCC, NHD, LCOM2, LCOM3)
over every class, then writes per-metric reports, a project index, a
class-by-metric matrix and a score badge.
"""

__version__ = "0.1.0"

from .app import App

__all__ = [
    "App",
    "__version__",
]
