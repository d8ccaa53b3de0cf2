import networkx as nx
import numpy as np

from graph_generators.planted_cut import join_with_cut


def generate_ba(left: int, right: int, m: int = 4, width: int = 3, seed: int = None) -> nx.Graph:
    """
    Generates two Barabási-Albert (preferential attachment) clusters joined
    by `width` wires.

    Args:
        left (int): nodes in the first cluster.
        right (int): nodes in the second cluster.
        m (int): edges attached from each new node. Growing from K_{m+1}
                 keeps each cluster m-edge-connected, so m > width makes
                 the joining wires the unique minimum cut.
        width (int): number of joining wires.
        seed (int): seed for both clusters and the joining wires.

    Returns:
        nx.Graph: see `generate_rr`.
    """
    if m <= width:
        raise ValueError("m must be > width")
    if min(left, right) <= m:
        raise ValueError("clusters must have more than m nodes")

    rng = np.random.default_rng(seed)
    A = nx.barabasi_albert_graph(left, m, seed=int(rng.integers(2**31 - 1)),
                                 initial_graph=nx.complete_graph(m + 1))
    B = nx.barabasi_albert_graph(right, m, seed=int(rng.integers(2**31 - 1)),
                                 initial_graph=nx.complete_graph(m + 1))
    return join_with_cut(A, B, width, rng)
