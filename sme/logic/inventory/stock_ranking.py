"""Addressable min-heap ranking products by (stock, id).

A plain heapq list would need a linear scan to find an entry whenever its stock
changes. This heap keeps an id -> position map alongside the array so an entry
can be repositioned in O(log n).
"""
from __future__ import annotations
import heapq
from typing import Dict, Iterator, List, Optional, Tuple

__all__ = ["StockRanking"]

Entry = Tuple[int, int]  # (stock, product_id)


class StockRanking:
    def __init__(self):
        self._heap: List[Entry] = []
        self._pos: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, product_id: int) -> bool:
        return product_id in self._pos

    def push(self, product_id: int, stock: int) -> None:
        if product_id in self._pos:
            self.update(product_id, stock)
            return
        self._heap.append((stock, product_id))
        self._pos[product_id] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def update(self, product_id: int, stock: int) -> None:
        '''Reposition an existing entry after its stock changed. KeyError if unknown.'''
        i = self._pos[product_id]
        old = self._heap[i]
        new = (stock, product_id)
        self._heap[i] = new
        if new < old:
            self._sift_up(i)
        else:
            self._sift_down(i)

    def stock_of(self, product_id: int) -> int:
        return self._heap[self._pos[product_id]][0]

    def peek(self) -> Optional[Entry]:
        return self._heap[0] if self._heap else None

    def ascending(self) -> Iterator[Entry]:
        """Yield entries by ascending (stock, id) from a snapshot; the ranking is untouched."""
        snapshot = list(self._heap)  # already satisfies the heap property
        while snapshot:
            yield heapq.heappop(snapshot)

    # --- heap internals ---------------------------------------------------
    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._pos[heap[i][1]] = i
        self._pos[heap[j][1]] = j

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if heap[i] < heap[parent]:
                self._swap(i, parent)
                i = parent
            else:
                break

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < n and heap[left] < heap[smallest]:
                smallest = left
            if right < n and heap[right] < heap[smallest]:
                smallest = right
            if smallest == i:
                break
            self._swap(i, smallest)
            i = smallest
