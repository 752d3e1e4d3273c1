"""
Johnson's all-pairs shortest paths.

One Bellman-Ford run from a virtual source yields vertex potentials; the
potentials reweight every edge to a non-negative cost; Dijkstra then runs
once per vertex and the shift P[s] - P[t] is undone on each result. The
run reduces to the smallest distance over all ordered vertex pairs, or
reports a negative cycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple
import logging
import math

import numpy as np

from adjacency_list_graph import AdjacencyListGraph
from algorithms import BellmanFordEngine, DijkstraEngine, Distance
from bellman_ford_engine import SimpleBellmanFordEngine
from config import EngineConfig
from dijkstra_engine import SimpleDijkstraEngine
from errors import NegativeCycleError
from reweighting import restore_distance, reweight
from virtual_source_graph import VirtualSourceGraph

logger = logging.getLogger(__name__)


class JohnsonState(Enum):
    INITIALIZED = auto()
    BELLMAN_FORD_RUN = auto()
    NEGATIVE_CYCLE_DETECTED = auto()
    REWEIGHTED = auto()
    DIJKSTRA_RUN = auto()
    AGGREGATED = auto()


class APSPStatus(Enum):
    OK = "ok"
    NEGATIVE_CYCLE = "negative_cycle"


@dataclass
class APSPResult:
    """
    Outcome of one all-pairs run.

    minimum is None on a negative cycle and math.inf when no ordered pair
    of vertices has a finite distance.
    """

    status: APSPStatus
    vertex_count: int
    minimum: Optional[Distance] = None
    argmin: Optional[Tuple[int, int]] = None
    potentials: Dict[int, Distance] = field(default_factory=dict)
    distances: Optional[Dict[int, Dict[int, Distance]]] = None
    predecessors: Optional[Dict[int, Dict[int, Optional[int]]]] = None

    @property
    def has_negative_cycle(self) -> bool:
        return self.status is APSPStatus.NEGATIVE_CYCLE

    def distance_matrix(self) -> np.ndarray:
        """
        n x n matrix of true distances; row s-1, column t-1 holds dist(s, t).
        """
        if self.distances is None:
            raise ValueError("distance tables were not kept for this run")
        n = self.vertex_count
        matrix = np.full((n, n), np.inf)
        for s, row in self.distances.items():
            for t, d in row.items():
                matrix[s - 1, t - 1] = d
        return matrix

    def path(self, s: int, t: int) -> Optional[List[int]]:
        """Vertex sequence of a shortest s -> t path, or None if t is unreachable."""
        if self.predecessors is None or self.distances is None:
            raise ValueError("distance tables were not kept for this run")
        if self.distances[s][t] == math.inf:
            return None

        prev = self.predecessors[s]
        path = [t]
        while path[-1] != s:
            parent = prev[path[-1]]
            if parent is None:
                raise RuntimeError(f"broken predecessor chain from {t} back to {s}")
            path.append(parent)
        path.reverse()
        return path


class JohnsonEngine:
    """
    APSP orchestrator. Each run() builds its own graph store, potentials,
    heaps and distance tables; nothing carries over between runs.
    """

    def __init__(
        self,
        bellman_ford: Optional[BellmanFordEngine] = None,
        dijkstra: Optional[DijkstraEngine] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self.bellman_ford = bellman_ford or SimpleBellmanFordEngine()
        self.dijkstra = dijkstra or SimpleDijkstraEngine()
        self.config = config or EngineConfig()
        self.state = JohnsonState.INITIALIZED

    def run(self, vertex_count: int, edges: Iterable[Tuple[int, int, int]]) -> APSPResult:
        self.state = JohnsonState.INITIALIZED
        graph = AdjacencyListGraph.from_edges(vertex_count, edges)
        logger.debug("Johnson run: n=%d m=%d", vertex_count, len(graph))

        # Bellman-Ford on a transient copy with the virtual source attached.
        augmented = VirtualSourceGraph(graph)
        self.state = JohnsonState.BELLMAN_FORD_RUN
        try:
            potentials = self.bellman_ford.shortest_path_costs(augmented, augmented.source)
        except NegativeCycleError:
            self.state = JohnsonState.NEGATIVE_CYCLE_DETECTED
            logger.info("Negative cycle present, no APSP computed")
            return APSPResult(status=APSPStatus.NEGATIVE_CYCLE, vertex_count=vertex_count)
        potentials.pop(augmented.source)
        del augmented

        reweight(graph, potentials)
        self.state = JohnsonState.REWEIGHTED

        keep = self.config.keep_distance_tables
        distances: Dict[int, Dict[int, Distance]] = {}
        predecessors: Dict[int, Dict[int, Optional[int]]] = {}
        minimum: Distance = math.inf
        argmin: Optional[Tuple[int, int]] = None

        self.state = JohnsonState.DIJKSTRA_RUN
        for s in graph.vertices():
            reweighted, prev = self.dijkstra.shortest_paths(graph, s)
            row: Dict[int, Distance] = {}
            for t, d in reweighted.items():
                true_dist = restore_distance(d, potentials, s, t)
                row[t] = true_dist
                if true_dist == math.inf:
                    continue
                if s == t and not self.config.include_self_pairs:
                    continue
                if true_dist < minimum:
                    minimum = true_dist
                    argmin = (s, t)
            if keep:
                distances[s] = row
                predecessors[s] = prev
            logger.debug("Dijkstra from %d done, running minimum %s", s, minimum)

        self.state = JohnsonState.AGGREGATED
        logger.info("Shortest shortest path: %s (pair %s)", minimum, argmin)
        return APSPResult(
            status=APSPStatus.OK,
            vertex_count=vertex_count,
            minimum=minimum,
            argmin=argmin,
            potentials=potentials,
            distances=distances if keep else None,
            predecessors=predecessors if keep else None,
        )


def shortest_shortest_path(
    vertex_count: int,
    edges: Iterable[Tuple[int, int, int]],
    config: Optional[EngineConfig] = None,
) -> APSPResult:
    """Run Johnson's algorithm once with the default engines."""
    return JohnsonEngine(config=config).run(vertex_count, edges)
