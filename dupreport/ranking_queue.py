"""Collecting master reports and handing them back ranked by similarity."""

from __future__ import annotations

import heapq
import itertools

from .reports import MasterBugReport


class MasterReportPriorityQueue:
    """Masters keyed by their current similarity, drained best first.

    The similarity is read from each master's ``similarity_info`` when it is
    added. Masters with equal similarity come out in the order they were added.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, MasterBugReport]] = []
        self._counter = itertools.count()

    def add(self, master: MasterBugReport) -> None:
        if master is None:
            raise ValueError("cannot add None to the queue")
        similarity = master.similarity_info.similarity
        heapq.heappush(self._heap, (-similarity, next(self._counter), master))

    def __len__(self) -> int:
        return len(self._heap)

    def drain_sorted(self) -> list[MasterBugReport]:
        """Empty the queue, returning masters from highest to lowest similarity."""
        heap, self._heap = self._heap, []
        return [heapq.heappop(heap)[2] for _ in range(len(heap))]