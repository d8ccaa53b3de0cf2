import networkx as nx
import numpy as np

from graph_generators.planted_cut import join_with_cut


def generate_rr(left: int, right: int, degree: int = 6, width: int = 3, seed: int = None) -> nx.Graph:
    """
    Generates two random `degree`-regular clusters joined by `width` wires.

    Random regular graphs are `degree`-edge-connected with high probability,
    so for `degree > width` the joining wires are the unique minimum cut.

    Returns:
        nx.Graph: nodes 0..left+right-1; `G.graph["cut"]` holds the joining
        pairs and `G.graph["sizes"]` the cluster sizes.
    """
    if degree <= width:
        raise ValueError("degree must be > width")

    rng = np.random.default_rng(seed)
    A = nx.random_regular_graph(degree, left, seed=int(rng.integers(2**31 - 1)))
    B = nx.random_regular_graph(degree, right, seed=int(rng.integers(2**31 - 1)))
    return join_with_cut(A, B, width, rng)
