import logging
from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

import numpy as np

from wirecut.errors import ReductionBudgetExhausted
from wirecut.reduction import EXPECTED_WIRE_COUNT, require_components, reduce
from wirecut.wires import Wire, Wires

logger = logging.getLogger(__name__)

# Maximum attempts before giving up and declaring defeat.
MAX_ATTEMPTS = 10


@dataclass(frozen=True)
class Partition:
    """The two groups left after cutting `cut` out of the original network."""

    cut: Tuple[Wire, ...]
    left: FrozenSet[str]
    right: FrozenSet[str]
    attempts: int

    @property
    def product(self) -> int:
        return len(self.left) * len(self.right)


def find_partition(wires: Wires, rng: Optional[np.random.Generator] = None, *,
                   target: int = EXPECTED_WIRE_COUNT, max_attempts: int = MAX_ATTEMPTS) -> Partition:
    """
    Finds `target` wires whose removal splits `wires` into exactly two groups.

    Raises:
        InputModelError: `wires` has fewer components than `target`.
        ReductionBudgetExhausted: no attempt produced such a cut.
    """
    require_components(wires, target)
    if rng is None:
        rng = np.random.default_rng()

    n = wires.vertex_count()
    best = wires.edge_count()
    for attempt in range(1, max_attempts + 1):
        reduced = reduce(wires, rng, target)
        best = min(best, reduced.edge_count())
        if reduced.edge_count() != target:
            logger.warning("Attempt %d/%d: reduction left %d wires, expected %d",
                           attempt, max_attempts, reduced.edge_count(), target)
            continue

        to_cut = sorted(reduced.wires)
        disconnected = wires.disconnect(to_cut)
        first = wires.original(to_cut[0])
        left = disconnected.reachable_from(first.head)
        right = disconnected.reachable_from(first.tail)
        if left & right or len(left) + len(right) != n:
            logger.warning("Attempt %d/%d: cutting %d wires left groups of %d and %d out of %d components",
                           attempt, max_attempts, target, len(left), len(right), n)
            continue

        logger.debug("Attempt %d/%d: cut %s", attempt, max_attempts,
                     ", ".join(str(wires.original(i)) for i in to_cut))
        return Partition(
            cut=tuple(wires.original(i) for i in to_cut),
            left=frozenset(left),
            right=frozenset(right),
            attempts=attempt,
        )

    raise ReductionBudgetExhausted(max_attempts, target, best)


def solve(wires: Wires, rng: Optional[np.random.Generator] = None, *,
          target: int = EXPECTED_WIRE_COUNT, max_attempts: int = MAX_ATTEMPTS) -> int:
    """Product of the sizes of the two groups left after cutting `target` wires."""
    return find_partition(wires, rng, target=target, max_attempts=max_attempts).product
