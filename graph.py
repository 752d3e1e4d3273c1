"""
Directed, weighted graph abstraction for the APSP engine.

Vertices are integer labels 1..n (0 is reserved for the virtual source).
Edges are directed: u -> v with an integer cost.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class Edge:
    """
    One directed arc.

    `cost` may be rewritten once by the reweighting transform;
    `original_cost` keeps the input value.
    """

    u: int
    v: int
    cost: int
    original_cost: int = field(init=False)

    def __post_init__(self) -> None:
        self.original_cost = self.cost


class Graph(ABC):
    """Directed, weighted graph over integer vertex labels."""

    @property
    @abstractmethod
    def vertex_count(self) -> int:
        """Number of vertices."""
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Iterable[int]:
        """Return all vertex labels in the graph."""
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> Iterable[Edge]:
        """Return every edge in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: int) -> Iterable[Edge]:
        """Edges whose tail is vertex."""
        raise NotImplementedError

    @abstractmethod
    def incoming(self, vertex: int) -> Iterable[Edge]:
        """Edges whose head is vertex."""
        raise NotImplementedError
