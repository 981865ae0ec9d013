"""Class skeletons: the analyzable units handed from the Base to metrics."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MethodSkeleton:
    """What a cohesion metric needs to know about one method.

    ``attributes`` are instance/class attributes reached through the
    receiver (``self.x``/``cls.x``); ``calls`` are sibling methods invoked
    the same way; ``params`` are the annotated parameter types, in order.
    """

    name: str
    attributes: frozenset[str] = frozenset()
    calls: frozenset[str] = frozenset()
    params: tuple[str, ...] = ()


@dataclass(frozen=True)
class ClassSkeleton:
    """One analyzable class: qualified name, origin, attributes and methods."""

    name: str
    path: str = ""
    attributes: frozenset[str] = frozenset()
    methods: tuple[MethodSkeleton, ...] = field(default_factory=tuple)
