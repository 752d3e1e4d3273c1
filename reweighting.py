"""
Johnson reweighting: make every edge cost non-negative using potentials.

For valid shortest-path potentials P,

    cost'(u, v) = cost(u, v) + P[u] - P[v] >= 0

and every s -> t path is shifted by the same constant P[s] - P[t], so the
shortest paths themselves do not change.
"""

from typing import Iterable, Mapping
import math

from adjacency_list_graph import AdjacencyListGraph
from algorithms import Distance
from graph import Edge


def reweight(graph: AdjacencyListGraph, potentials: Mapping[int, Distance]) -> None:
    """
    Rewrite every stored edge cost in place. Allowed once per graph.
    """
    if graph.reweighted:
        raise RuntimeError("graph edge costs have already been reweighted")

    new_costs = []
    for edge in graph.edges():
        p_u = potentials.get(edge.u, math.inf)
        p_v = potentials.get(edge.v, math.inf)
        if p_u == math.inf or p_v == math.inf:
            raise ValueError(f"no finite potential for edge ({edge.u}, {edge.v})")
        cost = edge.original_cost + p_u - p_v
        if cost < 0:
            raise ValueError(
                f"potentials are not feasible: edge ({edge.u}, {edge.v}) "
                f"reweights to {cost}"
            )
        new_costs.append((edge, cost))

    # Validate everything before touching any edge.
    for edge, cost in new_costs:
        edge.cost = cost
    graph.reweighted = True


def restore_distance(
    reweighted_dist: Distance, potentials: Mapping[int, Distance], s: int, t: int
) -> Distance:
    """Undo the reweighting shift for one s -> t distance."""
    if reweighted_dist == math.inf:
        return math.inf
    return reweighted_dist - potentials[s] + potentials[t]


def path_cost(path: Iterable[Edge], original: bool = False) -> int:
    """Sum of current (or original) costs along a sequence of edges."""
    if original:
        return sum(edge.original_cost for edge in path)
    return sum(edge.cost for edge in path)
