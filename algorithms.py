"""
Algorithm interfaces for single-source shortest paths.

Keeps the solvers separate from the all-pairs orchestration.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Union

from graph import Graph

Distance = Union[int, float]


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest paths over non-negative costs.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: int) -> Dict[int, Distance]:
        """
        Compute shortest-path costs from source to every vertex.

        Returns:
            Mapping vertex -> path_cost(source -> vertex), math.inf when
            the vertex is unreachable.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: int
    ) -> tuple[Dict[int, Distance], Dict[int, Optional[int]]]:
        """
        Compute shortest-path costs plus the predecessor of each reached vertex.

        Returns:
            (dist, prev) where dist is the cost map and prev records parents.
        """
        raise NotImplementedError


class BellmanFordEngine(ABC):
    """
    Interface for single-source shortest paths with arbitrary integer costs.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: int) -> Dict[int, Distance]:
        """
        Compute shortest-path costs from source to every vertex.

        Raises:
            NegativeCycleError: a negative cycle is reachable from source.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: int
    ) -> tuple[Dict[int, Distance], Dict[int, Optional[int]]]:
        """
        Cost map plus predecessor map.

        Raises:
            NegativeCycleError: a negative cycle is reachable from source.
        """
        raise NotImplementedError
