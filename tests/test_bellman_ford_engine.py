"""
Unit tests for SimpleBellmanFordEngine.
"""

import math

import pytest

from adjacency_list_graph import AdjacencyListGraph
from bellman_ford_engine import SimpleBellmanFordEngine
from errors import NegativeCycleError
from virtual_source_graph import VirtualSourceGraph


def test_negative_edges_without_cycle():
    # 1 -> 2 (4), 1 -> 3 (5), 3 -> 2 (-3), 2 -> 4 (2)
    g = AdjacencyListGraph.from_edges(4, [(1, 2, 4), (1, 3, 5), (3, 2, -3), (2, 4, 2)])

    engine = SimpleBellmanFordEngine()
    dist, prev = engine.shortest_paths(g, 1)

    assert dist == {1: 0, 2: 2, 3: 5, 4: 4}
    assert prev[2] == 3
    assert prev[4] == 2
    assert prev[1] is None


def test_unreachable_vertex_is_infinite():
    g = AdjacencyListGraph.from_edges(3, [(1, 2, 1)])

    dist = SimpleBellmanFordEngine().shortest_path_costs(g, 1)

    assert dist[3] == math.inf


def test_negative_cycle_is_detected():
    g = AdjacencyListGraph.from_edges(3, [(1, 2, 1), (2, 3, 1), (3, 1, -3)])

    with pytest.raises(NegativeCycleError) as exc:
        SimpleBellmanFordEngine().shortest_path_costs(g, 1)

    assert exc.value.source == 1


def test_unreachable_negative_cycle_is_ignored():
    # cycle 2 <-> 3 is negative but cannot be reached from 1
    g = AdjacencyListGraph.from_edges(3, [(2, 3, -2), (3, 2, 1)])

    dist = SimpleBellmanFordEngine().shortest_path_costs(g, 1)

    assert dist == {1: 0, 2: math.inf, 3: math.inf}


def test_negative_self_loop_is_a_cycle():
    g = AdjacencyListGraph.from_edges(1, [(1, 1, -1)])

    with pytest.raises(NegativeCycleError):
        SimpleBellmanFordEngine().shortest_path_costs(g, 1)


def test_early_stop_skips_remaining_rounds():
    # A star is settled by the first round; the second round changes nothing.
    g =AdjacencyListGraph.from_edges(5, [(1, 2, 1), (1, 3, 1), (1, 4, 1), (1, 5, 1)])

    engine = SimpleBellmanFordEngine()
    engine.shortest_path_costs(g, 1)

    assert engine.last_iterations == 2


def test_potentials_satisfy_optimality_condition():
    edges = [(1, 2, -2), (2, 3, 3), (3, 1, 4), (1, 3, 2), (3, 4, -1), (4, 2, 5)]
    g = AdjacencyListGraph.from_edges(4, edges)
    aug = VirtualSourceGraph(g)

    potentials = SimpleBellmanFordEngine().shortest_path_costs(aug, aug.source)

    for u, v, cost in edges:
        assert potentials[v] <= potentials[u] + cost
    # the virtual source reaches everything
    assert all(p != math.inf for p in potentials.values())


def test_unknown_source_rejected():
    g = AdjacencyListGraph(2)
    with pytest.raises(ValueError):
        SimpleBellmanFordEngine().shortest_path_costs(g, 3)
