"""Shared fixtures for Cohesion Peek tests."""

import textwrap

import pytest

from cohesion_peek.metrics import Metric
from cohesion_peek.report import Templates
from cohesion_peek.scanning import Base, ClassSkeleton, MethodSkeleton


class StaticBase(Base):
    """Base over a fixed list of skeletons."""

    def __init__(self, targets):
        super().__init__()
        self._given = list(targets)

    def _collect(self):
        return list(self._given)


def fixed_metric(name, values, reverse=False, colors=(0.3, 0.7)):
    """Metric class whose score per class is looked up in ``values``."""

    def measure(self, skeleton):
        return values[skeleton.name], {"methods": len(skeleton.methods)}

    return type(
        f"Fixed{name}",
        (Metric,),
        {
            "name": name,
            "title": f"Fixed {name}",
            "description": "Scores from a lookup table",
            "reverse": reverse,
            "colors": colors,
            "measure": measure,
        },
    )


@pytest.fixture
def make_metric():
    """Factory: ``make_metric(name, {class: value}, reverse=False)``."""
    return fixed_metric


@pytest.fixture
def make_base():
    """Factory: ``make_base([ClassSkeleton, ...])``."""
    return StaticBase


@pytest.fixture
def two_classes():
    """Base with two plain classes."""
    return StaticBase([ClassSkeleton(name="class1"), ClassSkeleton(name="class2")])


@pytest.fixture
def m1_m2():
    """Metric pair from the end-to-end scenario."""
    return [
        fixed_metric("M1", {"class1": 1.0, "class2": 0.5}),
        fixed_metric("M2", {"class1": 0.0, "class2": 1.0}),
    ]


@pytest.fixture
def account():
    """Three methods over two attributes; deposit/withdraw share ``balance``."""
    return ClassSkeleton(
        name="bank.Account",
        path="bank.py",
        attributes=frozenset({"balance", "owner"}),
        methods=(
            MethodSkeleton("deposit", attributes=frozenset({"balance"}), params=("int",)),
            MethodSkeleton("withdraw", attributes=frozenset({"balance"}), params=("int",)),
            MethodSkeleton("owner_name", attributes=frozenset({"owner"})),
        ),
    )


@pytest.fixture
def templates():
    return Templates.load()


@pytest.fixture
def sample_project(tmp_path):
    """Small Python package with nested, static, excluded and broken files."""
    root = tmp_path / "project"
    shop = root / "shop"
    shop.mkdir(parents=True)
    (shop / "__init__.py").write_text("class Shop:\n    pass\n")
    (shop / "cart.py").write_text(
        textwrap.dedent(
            """
            class Cart:
                TAX = 0.2

                def __init__(self, owner):
                    self.owner = owner
                    self.items = []

                def add(self, item: Item, qty: int) -> None:
                    self.items.append((item, qty))

                def total(self) -> float:
                    return sum(q for _, q in self.items) * (1 + self.TAX)

                def checkout(self, card: str):
                    self.add_log(card)
                    return self.total()

                def add_log(self, card):
                    pass

                @staticmethod
                def make(size: int):
                    return Cart(size)

                class Line:
                    def describe(self):
                        return self.text


            def helper():
                class Hidden:
                    pass
            """
        )
    )
    (shop / "test_cart.py").write_text("class TestCart:\n    def test_it(self):\n        pass\n")
    (root / "broken.py").write_text("class Broken(:\n")
    (root / ".hidden").mkdir()
    (root / ".hidden" / "secret.py").write_text("class Secret:\n    pass\n")
    (root / "venv").mkdir()
    (root / "venv" / "lib.py").write_text("class Vendored:\n    pass\n")
    return root
