"""
Exceptions raised by the shortest-path engines.
"""


class ShortestPathError(Exception):
    """Base class for engine failures."""


class NegativeCycleError(ShortestPathError):
    """
    A negative-cost cycle is reachable from the search source.

    Raised by Bellman-Ford when an iteration past the longest simple-path
    length still improves a distance.
    """

    def __init__(self, source: int, iterations: int) -> None:
        super().__init__(
            f"negative cycle reachable from vertex {source} "
            f"(still relaxing after {iterations} iterations)"
        )
        self.source = source
        self.iterations = iterations


class HeapUnderflowError(ShortestPathError):
    """Removal from an empty heap or from an unoccupied slot."""
