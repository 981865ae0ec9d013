"""Python source Base: class skeletons extracted with the ``ast`` module."""

from __future__ import annotations

import ast
from fnmatch import fnmatch
from pathlib import Path
from typing import Optional, Union

from ..config import AnalysisConfig
from ..exceptions import InvalidPathError, ParsingError
from ..logging_config import get_logger
from .base import Base
from .models import ClassSkeleton, MethodSkeleton

logger = get_logger(__name__)

_CONSTRUCTORS = frozenset({"__init__", "__new__"})
_TEST_FILES = ("conftest.py",)

_FunctionNode = Union[ast.FunctionDef, ast.AsyncFunctionDef]


def should_skip_file(relpath: str, exclude_patterns: list[str]) -> bool:
    """Check a relative POSIX path against glob exclusion patterns.

    A pattern matches anywhere in the tree, so ``venv/*`` skips both
    ``venv/a.py`` and ``sub/venv/a.py``.
    """
    for pattern in exclude_patterns:
        if fnmatch(relpath, pattern) or fnmatch(relpath, f"*/{pattern}"):
            return True
    return False


def module_name(relpath: Path) -> str:
    """``pkg/mod.py`` -> ``pkg.mod``; ``pkg/__init__.py`` -> ``pkg``."""
    parts = list(relpath.with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


class PythonBase(Base):
    """Walks a directory of ``.py`` files and collects every class.

    Files that fail to parse are logged and skipped; they contribute no
    classes to the snapshot.
    """

    def __init__(self, root_dir: Union[str, Path], config: Optional[AnalysisConfig] = None):
        super().__init__()
        self.root_dir = Path(root_dir)
        self.config = config or AnalysisConfig()
        if not self.root_dir.is_dir():
            raise InvalidPathError(self.root_dir, "not a directory")

    def _collect(self) -> list[ClassSkeleton]:
        classes: list[ClassSkeleton] = []
        files_scanned = 0
        files_skipped = 0
        files_errored = 0

        for filepath in sorted(self.root_dir.rglob("*.py"), key=lambda p: p.as_posix()):
            if not filepath.is_file():
                continue

            relpath = filepath.relative_to(self.root_dir)
            rel = relpath.as_posix()

            if files_scanned >= self.config.max_files:
                logger.warning(f"Reached max files limit ({self.config.max_files})")
                break

            if self._should_skip(relpath) or should_skip_file(rel, self.config.exclude_patterns):
                files_skipped += 1
                logger.debug(f"Skipped: {rel}")
                continue

            try:
                size = filepath.stat().st_size
            except OSError as e:
                files_errored += 1
                logger.warning(f"Cannot stat {rel}: {e}")
                continue
            if size > self.config.max_file_size_bytes:
                files_skipped += 1
                logger.debug(f"Skipped (size): {rel} ({size} bytes)")
                continue

            try:
                classes.extend(self._analyze_file(filepath, relpath))
                files_scanned += 1
            except ParsingError as e:
                files_errored += 1
                logger.warning(f"Parse error for {rel}: {e.reason}")

        logger.info(
            f"Scan complete: {files_scanned} parsed, {files_skipped} skipped, "
            f"{files_errored} errors, {len(classes)} classes"
        )
        return classes

    def _should_skip(self, relpath: Path) -> bool:
        """Skip hidden directories and, unless enabled, test modules."""
        if any(part.startswith(".") for part in relpath.parts[:-1]):
            return True
        if self.config.include_tests:
            return False
        name = relpath.name
        return name in _TEST_FILES or name.startswith("test_") or name.endswith("_test.py")

    def _analyze_file(self, filepath: Path, relpath: Path) -> list[ClassSkeleton]:
        try:
            source = filepath.read_text(encoding="utf-8", errors="replace")
            tree = ast.parse(source, filename=str(filepath))
        except (SyntaxError, ValueError) as e:
            raise ParsingError(filepath, str(e))

        prefix = module_name(relpath)
        found: list[ClassSkeleton] = []
        for node in tree.body:
            if isinstance(node, ast.ClassDef):
                _collect_class(node, prefix, relpath.as_posix(), found)
        return found


def _collect_class(node: ast.ClassDef, prefix: str, path: str, out: list[ClassSkeleton]) -> None:
    name = f"{prefix}.{node.name}" if prefix else node.name

    functions: list[_FunctionNode] = []
    declared: set[str] = set()
    for item in node.body:
        if isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef)):
            functions.append(item)
        elif isinstance(item, ast.ClassDef):
            _collect_class(item, name, path, out)
        elif isinstance(item, ast.Assign):
            for target in item.targets:
                if isinstance(target, ast.Name):
                    declared.add(target.id)
        elif isinstance(item, ast.AnnAssign) and isinstance(item.target, ast.Name):
            declared.add(item.target.id)

    method_names = {fn.name for fn in functions}
    attributes = set(declared - method_names)
    # Property getter/setter/deleter pairs and redefinitions share a name;
    # they are one method of the class.
    methods: dict[str, MethodSkeleton] = {}

    for fn in functions:
        touched, calls = _receiver_usage(fn, method_names)
        attributes.update(touched)
        if fn.name in _CONSTRUCTORS:
            continue
        method = MethodSkeleton(
            name=fn.name,
            attributes=frozenset(touched),
            calls=frozenset(calls - {fn.name}),
            params=_param_types(fn),
        )
        previous = methods.get(fn.name)
        if previous is not None:
            method = _merge(previous, method)
        methods[fn.name] = method

    out.append(
        ClassSkeleton(
            name=name,
            path=path,
            attributes=frozenset(attributes),
            methods=tuple(methods.values()),
        )
    )


def _is_static(fn: _FunctionNode) -> bool:
    return any(
        isinstance(d, ast.Name) and d.id == "staticmethod" for d in fn.decorator_list
    )


def _receiver(fn: _FunctionNode) -> Optional[str]:
    if _is_static(fn):
        return None
    positional = fn.args.posonlyargs + fn.args.args
    return positional[0].arg if positional else None


def _receiver_usage(fn: _FunctionNode, method_names: set[str]) -> tuple[set[str], set[str]]:
    """Split ``self.<x>`` references into attributes and sibling-method calls."""
    receiver = _receiver(fn)
    attributes: set[str] = set()
    calls: set[str] = set()
    if receiver is None:
        return attributes, calls
    for sub in ast.walk(fn):
        if (
            isinstance(sub, ast.Attribute)
            and isinstance(sub.value, ast.Name)
            and sub.value.id == receiver
        ):
            if sub.attr in method_names:
                calls.add(sub.attr)
            else:
                attributes.add(sub.attr)
    return attributes, calls


def _param_types(fn: _FunctionNode) -> tuple[str, ...]:
    args = fn.args.posonlyargs + fn.args.args + fn.args.kwonlyargs
    if _receiver(fn) is not None:
        args = args[1:]
    return tuple(ast.unparse(arg.annotation) for arg in args if arg.annotation is not None)


def _merge(first: MethodSkeleton, second: MethodSkeleton) -> MethodSkeleton:
    """Union of two same-named definitions; parameter types keep first-seen order."""
    return MethodSkeleton(
        name=first.name,
        attributes=first.attributes | second.attributes,
        calls=first.calls | second.calls,
        params=tuple(dict.fromkeys(first.params + second.params)),
    )
