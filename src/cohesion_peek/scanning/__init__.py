"""Scanning layer: turns a project directory into class skeletons."""

from .base import Base
from .models import ClassSkeleton, MethodSkeleton
from .python_base import PythonBase

__all__ = [
    "Base",
    "PythonBase",
    "ClassSkeleton",
    "MethodSkeleton",
]
