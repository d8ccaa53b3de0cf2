from pathlib import Path

import numpy as np
import pytest

from wirecut.parsing import read_wiring
from wirecut.wires import Wires

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def example_path():
    return DATA_DIR / "example.txt"


@pytest.fixture
def example(example_path):
    return Wires.from_adjacency(read_wiring(example_path))


@pytest.fixture
def square():
    # a - b
    # |   |
    # d - c   plus a parallel a - b wire
    return Wires.from_adjacency([
        ("a", ["b", "d"]),
        ("b", ["c", "a"]),
        ("c", ["d"]),
    ], dedupe=False)
