import random
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Put `src/` on sys.path so `forest_fire` and `visualization` import from a checkout."""

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class ScriptedRandom:
    """Random source returning a fixed sequence of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self.values):
            raise AssertionError("Random source exhausted")
        value = self.values[self.calls]
        self.calls += 1
        return value


class ConstantRandom:
    """Random source always returning the same value and counting draws."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def constant():
    """Factory for constant, draw-counting random sources."""
    return ConstantRandom


@pytest.fixture
def rng():
    """Seeded random generator."""
    return random.Random(1234)
