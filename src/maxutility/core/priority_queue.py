"""Indexed max-priority queue with removal by identity."""

from __future__ import annotations

from typing import Dict, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class IndexedPriorityQueue(Generic[T]):
    """
    Binary max-heap that tracks the position of every item.

    Items are keyed by identity, so unhashable or value-equal items are
    still told apart. Equal priorities resolve by the order in which items
    were first pushed; that order is kept when an item is removed and pushed
    again.

    push, pop and remove are O(log n).
    """

    def __init__(self) -> None:
        # heap entries are (priority, sequence, item)
        self._heap: List[Tuple[float, int, T]] = []
        self._positions: Dict[int, int] = {}
        self._sequence: Dict[int, int] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: object) -> bool:
        return id(item) in self._positions

    def push(self, item: T, priority: float) -> None:
        key = id(item)
        if key in self._positions:
            raise KeyError(f"Item already queued: {item!r}")
        if key not in self._sequence:
            self._sequence[key] = self._counter
            self._counter += 1
        self._heap.append((priority, self._sequence[key], item))
        self._positions[key] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0][2]

    def pop(self) -> T:
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return self._remove_at(0)

    def remove(self, item: T) -> None:
        position = self._positions.get(id(item))
        if position is None:
            raise KeyError(f"Item not queued: {item!r}")
        self._remove_at(position)

    def priority(self, item: T) -> float:
        position = self._positions.get(id(item))
        if position is None:
            raise KeyError(f"Item not queued: {item!r}")
        return self._heap[position][0]

    # =========================================================================
    # Heap maintenance
    # =========================================================================

    def _remove_at(self, position: int) -> T:
        last = len(self._heap) - 1
        if position != last:
            self._swap(position, last)
        _priority, _seq, item = self._heap.pop()
        del self._positions[id(item)]
        if position < len(self._heap):
            self._sift_down(position)
            self._sift_up(position)
        return item

    def _before(self, i: int, j: int) -> bool:
        """True if entry i should leave the queue before entry j."""
        pi, si, _ = self._heap[i]
        pj, sj, _ = self._heap[j]
        if pi != pj:
            return pi > pj
        return si < sj

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._positions[id(heap[i][2])] = i
        self._positions[id(heap[j][2])] = j

    def _sift_up(self, position: int) -> None:
        while position > 0:
            parent = (position - 1) // 2
            if not self._before(position, parent):
                break
            self._swap(position, parent)
            position = parent

    def _sift_down(self, position: int) -> None:
        size = len(self._heap)
        while True:
            left = 2 * position + 1
            right = left + 1
            best = position
            if left < size and self._before(left, best):
                best = left
            if right < size and self._before(right, best):
                best = right
            if best == position:
                return
            self._swap(position, best)
            position = best


__all__ = ["IndexedPriorityQueue"]
