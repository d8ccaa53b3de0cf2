import numpy as np
import pytest

from wirecut import reduction
from wirecut.errors import InputModelError
from wirecut.reduction import reduce, reduce_fast, reduce_slow
from wirecut.wires import Wires


def _two_cliques(size, bridges):
    """Two K_size cliques joined by the given (left index, right index) pairs."""
    left = [f"l{i}" for i in range(size)]
    right = [f"r{i}" for i in range(size)]
    records = []
    for side in (left, right):
        for i, name in enumerate(side):
            records.append((name, side[i + 1:]))
    records.extend((left[i], [right[j]]) for i, j in bridges)
    return Wires.from_adjacency(records)


@pytest.fixture
def five():
    # K4 plus a fifth component wired to three of its corners
    return Wires.from_adjacency([
        ("a", ["b", "c", "d"]),
        ("b", ["c", "d"]),
        ("c", ["d"]),
        ("e", ["a", "b", "c"]),
    ])


def test_already_at_target_is_returned_unchanged(rng):
    wires = Wires.from_adjacency([("a", ["b"]), ("b", ["c"]), ("c", ["d"])])
    assert reduce_slow(wires, rng) is wires
    assert reduce_fast(wires, rng) is wires
    assert reduce(wires, rng) is wires


def test_slow_reduction_contracts_to_two(five, rng):
    reduced = reduce_slow(five, rng)
    assert reduced.vertex_count() == 2
    assert reduced.edge_count() >= 3
    assert five.vertex_count() == 5
    assert five.edge_count() == 9


def test_fast_reduction_falls_back_to_slow_below_threshold(five, rng, monkeypatch):
    calls = []

    def fake_slow(wires, rng, target):
        calls.append(wires.vertex_count())
        return wires

    monkeypatch.setattr(reduction, "reduce_slow", fake_slow)
    reduce_fast(five, rng)
    assert calls == [5]


def test_fast_reduction_branches_shrink_the_network(rng, monkeypatch):
    wires = _two_cliques(6, [(0, 0), (1, 1), (2, 2)])
    sizes = []

    def fake_slow(w, rng, target):
        sizes.append(w.vertex_count())
        return w

    monkeypatch.setattr(reduction, "reduce_slow", fake_slow)
    reduce_fast(wires, rng)

    # 12 -> 10 -> 9 -> 8 -> 7 -> 6 -> 5
    assert sizes
    assert all(size < reduction.SLOW_REDUCTION_THRESHOLD for size in sizes)


def test_fast_reduction_does_not_touch_its_input(rng):
    wires = _two_cliques(6, [(0, 0), (1, 1), (2, 2)])
    before = (dict(wires.components), wires.all_edges())
    reduce_fast(wires, rng)
    assert (dict(wires.components), wires.all_edges()) == before


def test_fast_reduction_never_goes_below_the_minimum_cut(rng):
    wires = _two_cliques(6, [(0, 0), (1, 1), (2, 2)])
    for _ in range(5):
        reduced = reduce_fast(wires, rng)
        assert reduced.edge_count() >= 3


def test_reduce_finds_planted_cut():
    wires = _two_cliques(6, [(0, 1), (2, 3), (4, 5)])
    found = 0
    for seed in range(10):
        reduced = reduce(wires, np.random.default_rng(seed))
        if reduced.edge_count() == 3:
            found += 1
            assert reduced.vertex_count() == 2
            originals = {wires.original(i) for i in reduced.all_edges()}
            assert {frozenset(w) for w in originals} == {
                frozenset({"l0", "r1"}), frozenset({"l2", "r3"}), frozenset({"l4", "r5"})}
    assert found >= 7


def test_reduce_budget_returns_best(example, rng, monkeypatch):
    calls = []

    def fake_fast(wires, rng, target):
        calls.append(1)
        return wires.contract(0)

    monkeypatch.setattr(reduction, "reduce_fast", fake_fast)
    reduced = reduce(example, rng)

    # 15 * ln(15) / 14 rounds down to 2
    assert len(calls) == 2
    assert reduced.edge_count() < example.edge_count()


def test_reduce_rejects_too_few_components(rng):
    wires = Wires.from_adjacency([("a", ["b"])])
    with pytest.raises(InputModelError):
        reduce(wires, rng)


def test_same_seed_same_reduction(example):
    first = reduce(example, np.random.default_rng(7))
    second = reduce(example, np.random.default_rng(7))
    assert first.all_edges() == second.all_edges()
    assert dict(first.components) == dict(second.components)
