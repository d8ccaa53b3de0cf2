from collections import deque
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, NamedTuple, Set, Tuple

import numpy as np

from wirecut.errors import InputModelError, LooseWireError

MERGED_NAME = "<merged:{}>"


class Wire(NamedTuple):
    """A connection between two components; direction carries no meaning."""

    head: str
    tail: str

    def __eq__(self, other):
        if not isinstance(other, Wire):
            return False
        return frozenset(self) == frozenset(other)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(frozenset(self))

    def __str__(self):
        return f"{self.head} - {self.tail}"

    def is_joined_to(self, component: str) -> bool:
        return self.head == component or self.tail == component

    def other(self, component: str) -> str:
        if self.head == component:
            return self.tail
        if self.tail == component:
            return self.head
        raise LooseWireError(f"{component} is not joined by {self}")

    def replace(self, component: str, replacement: str) -> "Wire":
        """
        Returns a wire whose `component` end is moved onto `replacement`.
        """
        return Wire(self.other(component), replacement)


def _validate_name(name) -> str:
    if not isinstance(name, str) or not name:
        raise InputModelError(f"Component names must be non-empty strings, got {name!r}")
    if ":" in name or any(c.isspace() for c in name):
        raise InputModelError(f"Invalid component name {name!r}")
    return name


@dataclass(frozen=True)
class Wires:
    """
    A network of components joined by wires.

    `components` maps each component to the ids of the wires incident on it,
    `wires` maps each live wire id to its current endpoints. Wire ids are
    fixed when the network is built and survive contraction, so the id of a
    wire left after reduction still identifies the original connection via
    `original()`.

    Values are never mutated once constructed; both maps are exposed as
    read-only views and every transformation returns a new `Wires`.
    """

    components: Mapping[str, FrozenSet[int]]
    wires: Mapping[int, Wire]
    continue_from: int = 0
    origins: Tuple[Wire, ...] = field(default=(), repr=False, compare=False)

    def __post_init__(self):
        # the maps handed in are owned by this value from here on
        for attr in ("components", "wires"):
            value = getattr(self, attr)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, attr, MappingProxyType(value))

    @classmethod
    def from_adjacency(cls, records: Iterable[Tuple[str, Iterable[str]]], dedupe: bool = True) -> "Wires":
        """
        Builds a network from `(component, [connected components])` records.

        Args:
            records: adjacency records, e.g. from `wirecut.parsing.parse_wiring`
                or `dict.items()`.
            dedupe: collapse `a: b` and `b: a` into a single wire. When False
                every listing becomes its own (possibly parallel) wire.
        """
        components: Dict[str, Set[int]] = {}
        origins: List[Wire] = []
        seen: Set[Wire] = set()

        for component, others in records:
            component = _validate_name(component)
            outgoing = components.setdefault(component, set())
            for other in others:
                other = _validate_name(other)
                if other == component:
                    raise InputModelError(f"{component} is wired to itself")
                wire = Wire(component, other)
                if dedupe:
                    if wire in seen:
                        continue
                    seen.add(wire)

                wire_id = len(origins)
                origins.append(wire)
                outgoing.add(wire_id)
                components.setdefault(other, set()).add(wire_id)

        return cls(
            components={name: frozenset(ids) for name, ids in components.items()},
            wires=dict(enumerate(origins)),
            origins=tuple(origins),
        )

    # Queries

    def vertex_count(self) -> int:
        return len(self.components)

    def edge_count(self) -> int:
        return len(self.wires)

    def edges_incident_on(self, component: str) -> Dict[int, Wire]:
        try:
            ids = self.components[component]
        except KeyError:
            raise InputModelError(f"Unknown component {component!r}") from None
        return {wire_id: self.wires[wire_id] for wire_id in ids}

    def all_edges(self) -> Dict[int, Wire]:
        return dict(self.wires)

    def contains_edge(self, wire_id: int) -> bool:
        return wire_id in self.wires

    def original(self, wire_id: int) -> Wire:
        """The endpoints `wire_id` had before any contraction."""
        return self.origins[wire_id]

    # Contraction

    def contract(self, wire_id: int) -> "Wires":
        """
        Merges the two components joined by `wire_id` into a new synthetic
        component, dropping every wire that joined them.
        """
        components, wires = self._copy()
        _merge(components, wires, wire_id, MERGED_NAME.format(self.continue_from))
        return self._derive(components, wires, self.continue_from + 1)

    def contract_randomly(self, rng: np.random.Generator, limit: int) -> "Wires":
        """
        Contracts uniformly random wires until at most `limit` components
        remain, or until no wires are left to contract.
        """
        components, wires = self._copy()

        # ids dropped as self-loops are discarded lazily when drawn
        live = list(wires)
        i = self.continue_from
        while len(components) > limit and wires:
            idx = int(rng.integers(len(live)))
            wire_id = live[idx]
            if wire_id not in wires:
                live[idx] = live[-1]
                live.pop()
                continue

            _merge(components, wires, wire_id, MERGED_NAME.format(i))
            i += 1

        return self._derive(components, wires, i)

    # Disconnection & traversal

    def disconnect(self, wire_ids: Iterable[int]) -> "Wires":
        """
        Returns a copy without the given wires. Components left without any
        wire are kept.
        """
        to_cut = set(wire_ids)
        for wire_id in to_cut:
            if wire_id not in self.wires:
                raise LooseWireError(f"Cannot disconnect missing wire {wire_id}")

        components = {
            name: (ids - to_cut) if ids & to_cut else ids
            for name, ids in self.components.items()
        }
        wires = {k: v for k, v in self.wires.items() if k not in to_cut}
        return Wires(components, wires, self.continue_from, self.origins)

    def reachable_from(self, start: str) -> Set[str]:
        if start not in self.components:
            raise InputModelError(f"Unknown component {start!r}")

        visited = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for wire_id in self.components[current]:
                nxt = self.wires[wire_id].other(current)
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        return visited

    def count_reachable_from(self, start: str) -> int:
        return len(self.reachable_from(start))

    # Private helpers

    def _copy(self) -> Tuple[Dict[str, Set[int]], Dict[int, Wire]]:
        return {k: set(v) for k, v in self.components.items()}, dict(self.wires)

    def _derive(self, components: Dict[str, Set[int]], wires: Dict[int, Wire], continue_from: int) -> "Wires":
        return Wires(
            components={k: frozenset(v) for k, v in components.items()},
            wires=wires,
            continue_from=continue_from,
            origins=self.origins,
        )


def _merge(components: Dict[str, Set[int]], wires: Dict[int, Wire], wire_id: int, name: str) -> None:
    """
    Merges the endpoints of `wire_id` into `name`, in place. Only ever called
    on maps owned by the caller.
    """
    if name in components:
        raise LooseWireError(f"Synthetic component {name} is already in use")

    wire = wires.pop(wire_id, None)
    if wire is None:
        raise LooseWireError(f"Wire {wire_id} is not part of this network")

    try:
        head = components.pop(wire.head)
        tail = components.pop(wire.tail)
    except KeyError as e:
        raise LooseWireError(f"Wire {wire_id} ({wire}) points at missing component {e}") from None

    merged = head | tail
    merged.discard(wire_id)
    for other_id in list(merged):
        other = wires.get(other_id)
        if other is None:
            raise LooseWireError(f"Found a loose wire {other_id} on {wire}")

        if other.is_joined_to(wire.head) and other.is_joined_to(wire.tail):
            del wires[other_id]
            merged.discard(other_id)
        elif other.is_joined_to(wire.head):
            wires[other_id] = other.replace(wire.head, name)
        elif other.is_joined_to(wire.tail):
            wires[other_id] = other.replace(wire.tail, name)
        else:
            raise LooseWireError(f"Wire {other_id} ({other}) touches neither end of {wire}")

    components[name] = merged
