"""
Bellman-Ford single-source shortest paths with negative-cycle detection.

Dynamic programming over the number of edges in a path, keeping only two
rows alive: the previous row (paths of at most i-1 edges) and the row
being computed (at most i edges).
"""

from typing import Dict, Optional
import logging
import math

from algorithms import BellmanFordEngine, Distance
from errors import NegativeCycleError
from graph import Graph

logger = logging.getLogger(__name__)


class SimpleBellmanFordEngine(BellmanFordEngine):
    """
    Two-row Bellman-Ford with early stopping.

    Complexity:
        O(V * E) time, O(V) extra space.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_iterations = 0
        self.last_edges_examined = 0
        self.last_relaxed = 0

    def shortest_path_costs(self, graph: Graph, source: int) -> Dict[int, Distance]:
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: Graph, source: int
    ) -> tuple[Dict[int, Distance], Dict[int, Optional[int]]]:
        """
        Run the recurrence

            current[v] = min(previous[v], min over (u -> v) of previous[u] + cost)

        for i = 1..V. A round with no improvement means the fixed point is
        reached. If round V (one past the longest simple path, V - 1 edges)
        still improves something, a negative cycle is reachable from source.
        """
        self.last_iterations = 0
        self.last_edges_examined = 0
        self.last_relaxed = 0

        vertices = list(graph.vertices())
        if source not in vertices:
            raise ValueError(f"source {source} is not a vertex of the graph")

        previous: Dict[int, Distance] = {v: math.inf for v in vertices}
        previous[source] = 0
        prev: Dict[int, Optional[int]] = {v: None for v in vertices}

        n = len(vertices)
        improved = False
        for _ in range(n):
            self.last_iterations += 1
            improved = False
            current = dict(previous)

            for v in vertices:
                for edge in graph.incoming(v):
                    self.last_edges_examined += 1
                    d_u = previous[edge.u]
                    # Never add through an unreached predecessor.
                    if d_u == math.inf:
                        continue
                    alt = d_u + edge.cost
                    if alt < current[v]:
                        current[v] = alt
                        prev[v] = edge.u
                        improved = True
                        self.last_relaxed += 1

            previous = current
            if not improved:
                break

        if improved:
            logger.warning(
                "Negative cycle reachable from %s after %d iterations",
                source,
                self.last_iterations,
            )
            raise NegativeCycleError(source, self.last_iterations)

        logger.debug(
            "Bellman-Ford from %s converged after %d iterations (%d relaxations)",
            source,
            self.last_iterations,
            self.last_relaxed,
        )
        return previous, prev
