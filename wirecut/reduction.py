import logging
from typing import Optional

import numpy as np

from wirecut.errors import InputModelError
from wirecut.wires import Wires

logger = logging.getLogger(__name__)

# Expected number of wires remaining after reduction.
EXPECTED_WIRE_COUNT = 3

# Below this many components "fast" reduction falls back to "slow" reduction.
SLOW_REDUCTION_THRESHOLD = 6

# Karger-Stein contracts to ceil(1 + n / SCALING_COEFFICIENT) before branching.
SCALING_COEFFICIENT = np.sqrt(2)


def _better(candidate: Wires, best: Wires) -> bool:
    return candidate.edge_count() < best.edge_count()


def require_components(wires: Wires, target: int) -> None:
    if wires.vertex_count() < target:
        raise InputModelError(
            f"Cannot look for a cut of {target} wires between "
            f"{wires.vertex_count()} components")


def reduce_slow(wires: Wires, rng: np.random.Generator, target: int = EXPECTED_WIRE_COUNT) -> Wires:
    """
    Karger's contraction: repeatedly contract down to two components and
    keep the trial leaving the fewest wires. Runs O(n^2 log n) trials,
    returning as soon as one leaves exactly `target` wires.
    """
    if wires.edge_count() in (target, 0):
        return wires

    n = wires.vertex_count()
    limit = max(1, int(n * (n - 1) * np.log(max(n, 1)) / 2))

    best = wires
    for _ in range(limit):
        candidate = wires.contract_randomly(rng, 2)
        if candidate.edge_count() == target:
            return candidate
        if _better(candidate, best):
            best = candidate
    return best


def reduce_fast(wires: Wires, rng: np.random.Generator, target: int = EXPECTED_WIRE_COUNT,
                threshold: int = SLOW_REDUCTION_THRESHOLD) -> Wires:
    """
    Karger-Stein recursive contraction.

    Contracts to roughly n / sqrt(2) components twice, independently, and
    recurses on both partial contractions; each branch owns its own copy of
    the network. Small networks are handed to `reduce_slow`.
    """
    if wires.edge_count() in (target, 0):
        return wires

    n = wires.vertex_count()
    if n < threshold:
        return reduce_slow(wires, rng, target)

    # ceil(1 + n / sqrt(2)) only shrinks the network for n >= 7
    t = min(int(np.ceil(1 + n / SCALING_COEFFICIENT)), n - 1)

    first = reduce_fast(wires.contract_randomly(rng, t), rng, target, threshold)
    if first.edge_count() == target:
        return first

    second = reduce_fast(wires.contract_randomly(rng, t), rng, target, threshold)
    if second.edge_count() == target:
        return second

    return second if _better(second, first) else first


def reduce(wires: Wires, rng: Optional[np.random.Generator] = None, target: int = EXPECTED_WIRE_COUNT) -> Wires:
    """
    Reduces `wires` until exactly `target` wires remain between the merged
    components, trying up to n ln(n) / (n - 1) fast reductions of the
    uncontracted network.

    Returns:
        Wires: the first reduction with exactly `target` wires, or the one
        with the fewest wires if the attempt budget runs out.
    """
    require_components(wires, target)
    if rng is None:
        rng = np.random.default_rng()

    if wires.edge_count() == target:
        return wires

    n = wires.vertex_count()
    limit = int(n * np.log(n) / (n - 1)) if n > 1 else 0

    best = wires
    for attempt in range(limit):
        candidate = reduce_fast(wires, rng, target)
        logger.debug("Reduction attempt %d/%d left %d wires between %d components",
                     attempt + 1, limit, candidate.edge_count(), candidate.vertex_count())
        if candidate.edge_count() == target:
            return candidate
        if _better(candidate, best):
            best = candidate

    logger.debug("Reduction budget of %d attempts exhausted, best left %d wires",
                 limit, best.edge_count())
    return best
