import networkx as nx
import pytest

from graph_generators.barabasi_albert import generate_ba
from graph_generators.planted_cut import component_name, to_records
from graph_generators.random_regular import generate_rr
from wirecut.wires import Wires


def test_component_names():
    assert component_name(0) == "aaa"
    assert component_name(27) == "abb"
    assert component_name(26 ** 3) == "baaa"
    assert len({component_name(i) for i in range(20000)}) == 20000


@pytest.mark.parametrize("generate, params", [
    (generate_rr, {"degree": 6}),
    (generate_ba, {"m": 4}),
])
def test_planted_graph(generate, params):
    G = generate(12, 15, width=3, seed=3, **params)
    assert G.number_of_nodes() == 27
    assert G.graph["sizes"] == (12, 15)
    assert len(G.graph["cut"]) == 3
    assert all(u < 12 <= v for u, v in G.graph["cut"])

    cut_value, (a, b) = nx.stoer_wagner(G)
    assert cut_value == 3
    assert sorted([len(a), len(b)]) == [12, 15]


def test_same_seed_same_graph():
    assert to_records(generate_ba(10, 10, seed=1)) == to_records(generate_ba(10, 10, seed=1))


def test_records_list_every_wire_once():
    G = generate_rr(10, 12, seed=4)
    wires = Wires.from_adjacency(to_records(G), dedupe=False)
    assert wires.vertex_count() == G.number_of_nodes()
    assert wires.edge_count() == G.number_of_edges()


@pytest.mark.parametrize("generate, params", [
    (generate_rr, {"degree": 3}),
    (generate_ba, {"m": 3}),
])
def test_cluster_connectivity_must_exceed_width(generate, params):
    with pytest.raises(ValueError):
        generate(10, 10, width=3, **params)
