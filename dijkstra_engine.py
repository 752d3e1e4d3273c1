"""
Heap-based DijkstraEngine implementation.

Uses IndexedMinHeap so a tentative distance can be lowered in place
(pull the vertex out of its slot, re-insert it with the new key) rather
than leaving stale entries behind.
"""

from typing import Dict, List, Optional, Tuple
import math

from algorithms import Distance, DijkstraEngine
from graph import Graph
from indexed_heap import IndexedMinHeap


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra over non-negative edge costs.

    Complexity:
        O(E log V).
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_settle_order: List[Tuple[int, Distance]] = []

    def _reset_counters(self) -> None:
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_settle_order = []

    def shortest_path_costs(self, graph: Graph, source: int) -> Dict[int, Distance]:
        """
        Compute the cost map for every vertex; unreachable ones stay math.inf.
        """
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: Graph, source: int
    ) -> tuple[Dict[int, Distance], Dict[int, Optional[int]]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        Every vertex starts in the heap keyed by its tentative distance. The
        minimum is extracted and settled; a settled distance is final. For
        each edge from the settled vertex to a vertex still in the heap, a
        shorter tentative distance is written back with remove_at + insert.
        Once the minimum key is infinite the rest of the heap is unreachable.
        """
        self._reset_counters()

        vertices = list(graph.vertices())
        if source not in vertices:
            raise ValueError(f"source {source} is not a vertex of the graph")

        dist: Dict[int, Distance] = {v: math.inf for v in vertices}
        prev: Dict[int, Optional[int]] = {v: None for v in vertices}
        dist[source] = 0

        heap = IndexedMinHeap(max(vertices) + 1)
        for v in vertices:
            heap.insert(v, dist[v])
            self.last_heap_pushes += 1

        while heap:
            u, d_u = heap.extract_min()
            self.last_heap_pops += 1
            if d_u == math.inf:
                break
            self.last_settle_order.append((u, d_u))

            for edge in graph.outgoing(u):
                self.last_edges_examined += 1
                if edge.cost < 0:
                    raise ValueError(
                        f"negative edge cost {edge.cost} on ({edge.u}, {edge.v})"
                    )
                v = edge.v
                if v not in heap:
                    continue
                alt = d_u + edge.cost
                if alt < dist[v]:
                    heap.remove_at(heap.position(v))
                    heap.insert(v, alt)
                    self.last_heap_pushes += 1
                    dist[v] = alt
                    prev[v] = u
                    self.last_relaxed += 1

        return dist, prev
