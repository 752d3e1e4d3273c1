"""
Graph variant that adds a virtual source vertex in front of a base graph.

The virtual source (label 0) has a zero-cost edge to every base vertex.
Those edges live only in this view; the base graph is never touched.
"""

from typing import Dict, Iterable, List

from graph import Edge, Graph

VIRTUAL_SOURCE = 0


class VirtualSourceGraph(Graph):
    """
    Read-only view of `base` plus vertex 0 and its zero-cost edges.
    """

    def __init__(self, base: Graph) -> None:
        self._base = base
        self._virtual_edges: Dict[int, Edge] = {
            v: Edge(VIRTUAL_SOURCE, v, 0) for v in base.vertices()
        }

    @property
    def source(self) -> int:
        return VIRTUAL_SOURCE

    @property
    def vertex_count(self) -> int:
        return self._base.vertex_count + 1

    def vertices(self) -> Iterable[int]:
        yield VIRTUAL_SOURCE
        yield from self._base.vertices()

    def edges(self) -> Iterable[Edge]:
        yield from self._virtual_edges.values()
        yield from self._base.edges()

    def outgoing(self, vertex: int) -> Iterable[Edge]:
        if vertex == VIRTUAL_SOURCE:
            return list(self._virtual_edges.values())
        return self._base.outgoing(vertex)

    def incoming(self, vertex: int) -> Iterable[Edge]:
        if vertex == VIRTUAL_SOURCE:
            return []
        edges: List[Edge] = list(self._base.incoming(vertex))
        virtual = self._virtual_edges.get(vertex)
        if virtual is not None:
            edges.append(virtual)
        return edges
