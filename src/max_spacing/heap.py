"""Priority queue of edges."""

from __future__ import annotations

import heapq
from typing import Iterable, Iterator, List

from .structures import Edge


class EdgeHeap:
    """Binary min-heap that hands out the cheapest edge first.

    Equal costs come out in input order because edges compare on
    ``(cost, index)``.
    """

    def __init__(self, edges: Iterable[Edge] = ()) -> None:
        self._heap: List[Edge] = list(edges)
        heapq.heapify(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._heap)

    def push(self, edge: Edge) -> None:
        heapq.heappush(self._heap, edge)

    def pop_min(self) -> Edge:
        if not self._heap:
            raise IndexError("pop from an empty edge heap")
        return heapq.heappop(self._heap)

    def peek_min(self) -> Edge | None:
        return self._heap[0] if self._heap else None
