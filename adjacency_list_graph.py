"""
Concrete directed, weighted graph store.

Implements the Graph interface with one flat edge list plus, per vertex,
lists of edge indices for outgoing and incoming arcs.
"""

from typing import Dict, Iterable, List, Tuple

from graph import Edge, Graph


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph over vertices 1..vertex_count.

    Parallel edges and self-loops are kept as separate arcs.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self._vertex_count = vertex_count
        self._edges: List[Edge] = []
        self._out: Dict[int, List[int]] = {v: [] for v in range(1, vertex_count + 1)}
        self._in: Dict[int, List[int]] = {v: [] for v in range(1, vertex_count + 1)}
        self.reweighted = False

    @classmethod
    def from_edges(
        cls, vertex_count: int, edges: Iterable[Tuple[int, int, int]]
    ) -> "AdjacencyListGraph":
        """Build a store from already-parsed (u, v, cost) triples."""
        graph = cls(vertex_count)
        for u, v, cost in edges:
            graph.add_edge(u, v, cost)
        return graph

    # --- Mutation API --------------------------------------------------------

    def add_edge(self, u: int, v: int, cost: int) -> Edge:
        """
        Append a directed edge u -> v. Both endpoints must already exist.
        """
        for label in (u, v):
            if label not in self._out:
                raise ValueError(
                    f"vertex {label} out of range 1..{self._vertex_count}"
                )
        if isinstance(cost, bool) or not isinstance(cost, int):
            raise ValueError(f"edge ({u}, {v}) cost must be an integer, got {cost!r}")

        edge = Edge(u, v, cost)
        index = len(self._edges)
        self._edges.append(edge)
        self._out[u].append(index)
        self._in[v].append(index)
        return edge

    # --- Graph interface -----------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    def vertices(self) -> Iterable[int]:
        return range(1, self._vertex_count + 1)

    def edges(self) -> Iterable[Edge]:
        return iter(self._edges)

    def outgoing(self, vertex: int) -> Iterable[Edge]:
        return [self._edges[i] for i in self._out.get(vertex, ())]

    def incoming(self, vertex: int) -> Iterable[Edge]:
        return [self._edges[i] for i in self._in.get(vertex, ())]

    def __len__(self) -> int:
        return len(self._edges)
