"""
End-to-end tests for the Johnson APSP orchestrator.
"""

import math
import random

import networkx as nx
import numpy as np
import pytest

from adjacency_list_graph import AdjacencyListGraph
from bellman_ford_engine import SimpleBellmanFordEngine
from config import EngineConfig
from dijkstra_engine import SimpleDijkstraEngine
from johnson import APSPStatus, JohnsonEngine, JohnsonState, shortest_shortest_path

KEEP = EngineConfig(keep_distance_tables=True)


class CountingDijkstraEngine(SimpleDijkstraEngine):
    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def shortest_paths(self, graph, source):
        self.calls += 1
        return super().shortest_paths(graph, source)


def random_edges(rng, n, m, allow_negative_cycles=False):
    """
    Random edges. Unless allowed, costs are w + h[v] - h[u] with w >= 0,
    which rules out negative cycles while still producing negative edges.
    """
    h = {v: rng.randint(-10, 10) for v in range(1, n + 1)}
    edges = []
    for _ in range(m):
        u, v = rng.randint(1, n), rng.randint(1, n)
        if allow_negative_cycles:
            if u == v:
                continue
            edges.append((u, v, rng.randint(-5, 10)))
        else:
            edges.append((u, v, rng.randint(0, 10) + h[v] - h[u]))
    return edges


def to_networkx(n, edges):
    g = nx.DiGraph()
    g.add_nodes_from(range(1, n + 1))
    for u, v, cost in edges:
        if not g.has_edge(u, v) or cost < g[u][v]["weight"]:
            g.add_edge(u, v, weight=cost)
    return g


def test_scenario_a_simple_chain():
    result = shortest_shortest_path(3, [(1, 2, 1), (2, 3, 1), (1, 3, 5)])

    assert result.status is APSPStatus.OK
    assert result.minimum == 1
    assert result.argmin in {(1, 2), (2, 3)}


def test_scenario_b_negative_cycle():
    dijkstra = CountingDijkstraEngine()
    engine = JohnsonEngine(dijkstra=dijkstra)

    result = engine.run(3, [(1, 2, 1), (2, 3, 1), (3, 1, -3)])

    assert result.has_negative_cycle
    assert result.minimum is None
    assert engine.state is JohnsonState.NEGATIVE_CYCLE_DETECTED
    assert dijkstra.calls == 0


def test_scenario_c_isolated_vertex():
    result = shortest_shortest_path(1, [])

    assert result.status is APSPStatus.OK
    assert result.minimum == math.inf
    assert result.minimum != 0
    assert result.argmin is None


def test_self_pairs_only_when_configured():
    result = shortest_shortest_path(1, [], EngineConfig(include_self_pairs=True))

    assert result.minimum == 0
    assert result.argmin == (1, 1)


def test_scenario_d_disconnected_components():
    edges = [(1, 2, 3), (2, 1, 4), (3, 4, -2)]

    result = shortest_shortest_path(4, edges, KEEP)

    assert result.minimum == -2
    assert result.argmin == (3, 4)
    assert result.distances[1][3] == math.inf
    assert result.distances[4][3] == math.inf


def test_negative_edges_recovered_distances():
    edges = [(1, 2, -2), (2, 3, 3), (3, 1, 4), (1, 3, 2), (3, 4, -1), (4, 2, 5)]

    result = shortest_shortest_path(4, edges, KEEP)

    assert result.distances[1] == {1: 0, 2: -2, 3: 1, 4: 0}
    assert result.minimum == -2
    assert result.path(1, 4) == [1, 2, 3, 4]
    assert result.path(1, 1) == [1]


def test_path_to_unreachable_vertex_is_none():
    result = shortest_shortest_path(2, [(1, 2, 1)], KEEP)

    assert result.path(2, 1) is None


def test_tables_dropped_by_default():
    result = shortest_shortest_path(2, [(1, 2, 1)])

    assert result.distances is None
    with pytest.raises(ValueError):
        result.distance_matrix()


def test_engine_reaches_aggregated_state():
    engine = JohnsonEngine()
    engine.run(2, [(1, 2, -1)])

    assert engine.state is JohnsonState.AGGREGATED


def test_run_is_idempotent():
    rng = random.Random(11)
    edges = random_edges(rng, 12, 40)
    engine = JohnsonEngine(config=KEEP)

    first = engine.run(12, edges)
    second = engine.run(12, edges)

    assert first.minimum == second.minimum
    assert first.argmin == second.argmin
    assert first.potentials == second.potentials
    assert first.distances == second.distances


def test_recovered_distances_match_direct_bellman_ford():
    rng = random.Random(5)
    n = 15
    edges = random_edges(rng, n, 60)

    result = shortest_shortest_path(n, edges, KEEP)
    original = AdjacencyListGraph.from_edges(n, edges)
    bf = SimpleBellmanFordEngine()

    for s in original.vertices():
        assert result.distances[s] == bf.shortest_path_costs(original, s)


@pytest.mark.parametrize("seed", range(5))
def test_matches_networkx_floyd_warshall(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 20)
    edges = random_edges(rng, n, rng.randint(0, 4 * n))

    result = shortest_shortest_path(n, edges, KEEP)
    expected = nx.floyd_warshall(to_networkx(n, edges))

    matrix = result.distance_matrix()
    for s in range(1, n + 1):
        for t in range(1, n + 1):
            assert matrix[s - 1, t - 1] == expected[s][t]

    off_diagonal = matrix[~np.eye(n, dtype=bool)]
    assert result.minimum == off_diagonal.min()


@pytest.mark.parametrize("seed", range(10))
def test_negative_cycle_detection_matches_networkx(seed):
    rng = random.Random(100 + seed)
    n = rng.randint(2, 10)
    edges = random_edges(rng, n, rng.randint(1, 3 * n), allow_negative_cycles=True)

    result = shortest_shortest_path(n, edges)

    assert result.has_negative_cycle == nx.negative_edge_cycle(to_networkx(n, edges))
