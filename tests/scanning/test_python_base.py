"""Tests for cohesion_peek.scanning.python_base."""

import logging
import textwrap
from pathlib import Path

import pytest

from cohesion_peek.config import AnalysisConfig
from cohesion_peek.exceptions import InvalidPathError
from cohesion_peek.scanning import ClassSkeleton, MethodSkeleton, PythonBase
from cohesion_peek.scanning.python_base import module_name, should_skip_file


def by_name(base):
    return {target.name: target for target in base.targets()}


def method(skeleton, name):
    return next(m for m in skeleton.methods if m.name == name)


class TestDiscovery:
    """Which files and classes end up in the snapshot."""

    def test_sorted_class_names(self, sample_project):
        base = PythonBase(sample_project)
        assert base.names() == ["shop.Shop", "shop.cart.Cart", "shop.cart.Cart.Line"]

    def test_skips_hidden_excluded_broken_and_tests(self, sample_project):
        names = PythonBase(sample_project).names()
        assert not any("Secret" in n or "Vendored" in n or "Broken" in n for n in names)
        assert "shop.test_cart.TestCart" not in names

    def test_include_tests(self, sample_project):
        base = PythonBase(sample_project, AnalysisConfig(include_tests=True))
        assert "shop.test_cart.TestCart" in base.names()

    def test_exclude_pattern(self, sample_project):
        config = AnalysisConfig(exclude_patterns=["shop/cart.py", "venv/*"])
        assert PythonBase(sample_project, config).names() == ["shop.Shop"]

    def test_max_files(self, sample_project):
        base = PythonBase(sample_project, AnalysisConfig(max_files=1))
        assert base.names() == ["shop.Shop"]

    def test_classes_inside_functions_ignored(self, sample_project):
        assert not any(n.endswith("Hidden") for n in PythonBase(sample_project).names())

    def test_snapshot_is_stable(self, sample_project):
        base = PythonBase(sample_project)
        first = base.targets()
        (sample_project / "late.py").write_text("class Late:\n    pass\n")
        assert base.targets() is first

    def test_missing_root(self, tmp_path):
        with pytest.raises(InvalidPathError):
            PythonBase(tmp_path / "nope")


class TestSkeletons:
    """Attributes, calls and parameter types extracted from Cart."""

    def test_class_attributes(self, sample_project):
        cart = by_name(PythonBase(sample_project))["shop.cart.Cart"]
        assert cart.attributes == {"TAX", "owner", "items"}
        assert cart.path == "shop/cart.py"

    def test_constructor_not_a_method(self, sample_project):
        cart = by_name(PythonBase(sample_project))["shop.cart.Cart"]
        assert [m.name for m in cart.methods] == ["add", "total", "checkout", "add_log", "make"]

    def test_attribute_usage(self, sample_project):
        cart = by_name(PythonBase(sample_project))["shop.cart.Cart"]
        assert method(cart, "add").attributes == {"items"}
        assert method(cart, "total").attributes == {"items", "TAX"}

    def test_sibling_calls(self, sample_project):
        cart = by_name(PythonBase(sample_project))["shop.cart.Cart"]
        checkout = method(cart, "checkout")
        assert checkout.calls == {"add_log", "total"}
        assert checkout.attributes == frozenset()

    def test_param_types_exclude_receiver(self, sample_project):
        cart = by_name(PythonBase(sample_project))["shop.cart.Cart"]
        assert method(cart, "add").params == ("Item", "int")
        assert method(cart, "checkout").params == ("str",)
        assert method(cart, "add_log").params == ()

    def test_static_method_has_no_receiver(self, sample_project):
        cart = by_name(PythonBase(sample_project))["shop.cart.Cart"]
        make = method(cart, "make")
        assert make.params == ("int",)
        assert make.attributes == frozenset()

    def test_nested_class(self, sample_project):
        line = by_name(PythonBase(sample_project))["shop.cart.Cart.Line"]
        assert line.methods == (MethodSkeleton("describe", attributes=frozenset({"text"})),)
        assert line.attributes == {"text"}

    def test_empty_class(self, sample_project):
        shop = by_name(PythonBase(sample_project))["shop.Shop"]
        assert shop == ClassSkeleton(name="shop.Shop", path="shop/__init__.py")


class TestSharedNames:
    """Same-named methods and classes collapse to one entry each."""

    def test_property_setter_is_one_method(self, tmp_path):
        (tmp_path / "temp.py").write_text(
            textwrap.dedent(
                """
                class Temp:
                    @property
                    def celsius(self):
                        return self._c

                    @celsius.setter
                    def celsius(self, value: float):
                        self._c = value
                        self.touched = True

                    def fahrenheit(self):
                        return self.celsius * 9 / 5 + 32
                """
            )
        )
        temp = by_name(PythonBase(tmp_path))["temp.Temp"]
        assert [m.name for m in temp.methods] == ["celsius", "fahrenheit"]
        celsius = method(temp, "celsius")
        assert celsius.attributes == {"_c", "touched"}
        assert celsius.params == ("float",)
        assert method(temp, "fahrenheit").calls == {"celsius"}

    def test_redefined_class_last_wins(self, tmp_path, caplog):
        (tmp_path / "m.py").write_text(
            "class A:\n    def old(self):\n        pass\n\n\n"
            "class A:\n    def new(self):\n        pass\n"
        )
        with caplog.at_level(logging.WARNING, logger="cohesion_peek"):
            base = PythonBase(tmp_path)
            assert base.names() == ["m.A"]
        assert [m.name for m in base.targets()[0].methods] == ["new"]
        assert "m.A is defined again" in caplog.text

    def test_module_and_package_with_same_name(self, tmp_path):
        (tmp_path / "pkg").mkdir()
        (tmp_path / "pkg" / "__init__.py").write_text("class Thing:\n    pass\n")
        (tmp_path / "pkg.py").write_text("class Thing:\n    pass\n")
        base = PythonBase(tmp_path)
        assert base.names() == ["pkg.Thing"]
        assert base.targets()[0].path == "pkg/__init__.py"


class TestHelpers:
    @pytest.mark.parametrize(
        "relpath, expected",
        [
            ("pkg/mod.py", "pkg.mod"),
            ("pkg/__init__.py", "pkg"),
            ("top.py", "top"),
        ],
    )
    def test_module_name(self, relpath, expected):
        assert module_name(Path(relpath)) == expected

    def test_pattern_matches_nested_dirs(self):
        assert should_skip_file("venv/a.py", ["venv/*"])
        assert should_skip_file("sub/venv/a.py", ["venv/*"])
        assert not should_skip_file("src/venvs.py", ["venv/*"])
