import string
from typing import List, Tuple

import networkx as nx
import numpy as np


def component_name(i: int, width: int = 3) -> str:
    """Three-letter names in the style of the puzzle input: aaa, aab, ..."""
    letters = string.ascii_lowercase
    chars = []
    while i or len(chars) < width:
        i, r = divmod(i, len(letters))
        chars.append(letters[r])
    return "".join(reversed(chars))


def join_with_cut(left: nx.Graph, right: nx.Graph, width: int, rng: np.random.Generator) -> nx.Graph:
    """
    Joins two clusters by `width` wires between distinct random pairs of
    endpoints. Nodes of `right` are shifted past those of `left`.
    """
    n_left = left.number_of_nodes()
    n_right = right.number_of_nodes()
    if width > n_left * n_right:
        raise ValueError("width must be <= left * right")

    G = nx.disjoint_union(left, right)

    pairs = set()
    while len(pairs) < width:
        u = int(rng.integers(n_left))
        v = n_left + int(rng.integers(n_right))
        pairs.add((u, v))
    G.add_edges_from(sorted(pairs))
    G.graph["cut"] = sorted(pairs)
    G.graph["sizes"] = (n_left, n_right)
    return G


def to_records(G: nx.Graph) -> List[Tuple[str, List[str]]]:
    """
    Adjacency records listing every wire once, from its lower-numbered end.
    """
    mapping = {node: component_name(i) for i, node in enumerate(sorted(G.nodes()))}
    records = []
    for node in sorted(G.nodes()):
        others = [mapping[v] for v in sorted(G.neighbors(node)) if v > node]
        if others:
            records.append((mapping[node], others))
    return records
