"""
Binary min-heap over (vertex, key) pairs with a vertex -> slot map.

The position map makes it possible to pull a vertex out of any slot in
O(log n), which is what Dijkstra needs to lower a tentative distance:

    heap.remove_at(heap.position(v))
    heap.insert(v, new_key)

Vertices are integers in range(capacity). Ties between equal keys are
broken in no particular order.
"""

from typing import List, NamedTuple, Union

from errors import HeapUnderflowError

NOT_IN_HEAP = -1

Key = Union[int, float]


class HeapEntry(NamedTuple):
    vertex: int
    key: Key


class IndexedMinHeap:
    """
    Min-heap keyed on `key`, indexable by vertex.

    Invariant: pos[heap[i].vertex] == i for every occupied slot i, and
    pos[v] == NOT_IN_HEAP for every vertex not currently stored.
    """

    def __init__(self, capacity: int) -> None:
        self._heap: List[HeapEntry] = []
        self._pos: List[int] = [NOT_IN_HEAP] * capacity

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, vertex: int) -> bool:
        return 0 <= vertex < len(self._pos) and self._pos[vertex] != NOT_IN_HEAP

    def position(self, vertex: int) -> int:
        """Slot currently holding vertex, or NOT_IN_HEAP."""
        return self._pos[vertex]

    def peek(self) -> HeapEntry:
        if not self._heap:
            raise HeapUnderflowError("peek on empty heap")
        return self._heap[0]

    def insert(self, vertex: int, key: Key) -> None:
        """Append (vertex, key) and sift it up. O(log n)."""
        if not 0 <= vertex < len(self._pos):
            raise ValueError(f"vertex {vertex} outside heap capacity {len(self._pos)}")
        if self._pos[vertex] != NOT_IN_HEAP:
            raise ValueError(f"vertex {vertex} is already in the heap")

        self._heap.append(HeapEntry(vertex, key))
        self._pos[vertex] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> HeapEntry:
        """Remove and return the entry with the smallest key."""
        return self.remove_at(0)

    def remove_at(self, position: int) -> HeapEntry:
        """
        Remove and return the entry at slot `position`.

        The slot is swapped with the last entry and the heap shrinks by one;
        the entry moved into `position` is then sifted up or down as needed.
        """
        if not 0 <= position < len(self._heap):
            raise HeapUnderflowError(
                f"no entry at slot {position} (heap size {len(self._heap)})"
            )

        last = len(self._heap) - 1
        self._swap(position, last)
        removed = self._heap.pop()
        self._pos[removed.vertex] = NOT_IN_HEAP

        if position < len(self._heap):
            moved = self._heap[position].vertex
            self._sift_up(position)
            self._sift_down(self._pos[moved])
        return removed

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._pos[heap[i].vertex] = i
        self._pos[heap[j].vertex] = j

    def _sift_up(self, child: int) -> None:
        heap = self._heap
        while child > 0:
            parent = (child - 1) // 2
            if heap[parent].key <= heap[child].key:
                break
            self._swap(child, parent)
            child = parent

    def _sift_down(self, position: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * position + 1
            if left >= size:
                break
            right = left + 1
            smaller = left
            if right < size and heap[right].key < heap[left].key:
                smaller = right
            if heap[position].key <= heap[smaller].key:
                break
            self._swap(position, smaller)
            position = smaller
