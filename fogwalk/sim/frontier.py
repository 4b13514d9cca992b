"""Indexed binary min-heap with O(log n) decrease-key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar

from fogwalk.sim.errors import FrontierEmptyError, FrontierKeyError, HeapInvariantError

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class FrontierEntry(Generic[K]):
    key: K
    priority: float


class PriorityFrontier(Generic[K]):
    """Binary min-heap over ``(key, priority)`` with a key -> slot index.

    Each key occupies at most one slot. Inserting a key that is already
    present overwrites its priority in place and restores heap order from
    that slot, so a stale duplicate can never be extracted.
    """

    def __init__(self) -> None:
        self._heap: list[FrontierEntry[K]] = []
        self._index: dict[K, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def is_empty(self) -> bool:
        return not self._heap

    def priority_of(self, key: K) -> float:
        slot = self._index.get(key)
        if slot is None:
            raise FrontierKeyError(f"Key not found in frontier: {key!r}")
        return self._heap[slot].priority

    def insert(self, key: K, priority: float) -> None:
        slot = self._index.get(key)
        if slot is not None:
            previous = self._heap[slot].priority
            self._heap[slot] = FrontierEntry(key=key, priority=priority)
            if priority < previous:
                self._sift_up(slot)
            elif priority > previous:
                self._sift_down(slot)
            return
        self._heap.append(FrontierEntry(key=key, priority=priority))
        slot = len(self._heap) - 1
        self._index[key] = slot
        self._sift_up(slot)

    def decrease_key(self, key: K, priority: float) -> None:
        slot = self._index.get(key)
        if slot is None:
            raise FrontierKeyError(f"Key not found in frontier: {key!r}")
        current = self._heap[slot].priority
        if not priority < current:
            raise ValueError(
                f"New priority {priority} is not smaller than {current}."
            )
        self._heap[slot] = FrontierEntry(key=key, priority=priority)
        self._sift_up(slot)

    def peek_min(self) -> FrontierEntry[K]:
        if not self._heap:
            raise FrontierEmptyError("Frontier is empty.")
        return self._heap[0]

    def extract_min(self) -> FrontierEntry[K]:
        if not self._heap:
            raise FrontierEmptyError("Frontier is empty.")
        minimum = self._heap[0]
        last = self._heap.pop()
        del self._index[minimum.key]
        if self._heap:
            self._heap[0] = last
            self._index[last.key] = 0
            self._sift_down(0)
        return minimum

    def check_invariants(self) -> None:
        if len(self._index) != len(self._heap):
            raise HeapInvariantError(
                f"Index holds {len(self._index)} keys for {len(self._heap)} slots."
            )
        for slot, entry in enumerate(self._heap):
            if self._index.get(entry.key) != slot:
                raise HeapInvariantError(f"Index out of sync for {entry.key!r}.")
            if slot and self._heap[(slot - 1) // 2].priority > entry.priority:
                raise HeapInvariantError(f"Heap order violated at slot {slot}.")

    def _sift_up(self, slot: int) -> None:
        while slot > 0:
            parent = (slot - 1) // 2
            if self._heap[slot].priority >= self._heap[parent].priority:
                break
            self._swap(slot, parent)
            slot = parent

    def _sift_down(self, slot: int) -> None:
        size = len(self._heap)
        while True:
            left = 2 * slot + 1
            right = left + 1
            smallest = slot
            if (
                left < size
                and self._heap[left].priority < self._heap[smallest].priority
            ):
                smallest = left
            if (
                right < size
                and self._heap[right].priority < self._heap[smallest].priority
            ):
                smallest = right
            if smallest == slot:
                break
            self._swap(slot, smallest)
            slot = smallest

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].key] = i
        self._index[heap[j].key] = j
