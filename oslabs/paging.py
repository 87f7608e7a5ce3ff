"""Page replacement simulation: OPT, FIFO, LRU-K and LFU."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from enum import Enum


class PageReplaceAlgo(Enum):
    """Available page replacement policies."""

    OPT = "opt"
    FIFO = "fifo"
    LRU_K = "lru_k"
    LFU = "lfu"


_HISTORY_ALGOS = (PageReplaceAlgo.LFU, PageReplaceAlgo.LRU_K)


class PageReplacer:
    """Simulates page accesses against a fixed number of frames."""

    def __init__(
        self,
        algorithm: PageReplaceAlgo,
        frame_capacity: int,
        k: int = 2,
        reference: Sequence[int] | None = None,
    ) -> None:
        if frame_capacity == 0:
            raise ValueError("frame capacity must be positive")
        if reference is None:
            raise ValueError("a reference sequence is required")
        if algorithm is PageReplaceAlgo.LRU_K and k < 1:
            raise ValueError("k must be at least 1 for LRU-K")
        self.algorithm = algorithm
        self.frame_capacity = frame_capacity
        self.k = k
        self.reference = list(reference)
        self._frames: list[int] = []
        self._accesses = 0
        self._faults = 0
        self._replacements = 0
        self._fifo: deque[int] = deque()
        self._history: dict[int, deque[int]] = {}

    def access_page(self, page: int) -> None:
        """Access ``page``, loading or replacing a frame on a fault."""
        self._accesses += 1
        uses_history = self.algorithm in _HISTORY_ALGOS

        if page in self._frames:
            if uses_history:
                history = self._history.setdefault(page, deque())
                history.append(self._accesses)
                if len(history) > self.k:
                    history.popleft()
            return

        self._faults += 1
        if len(self._frames) < self.frame_capacity:
            self._frames.append(page)
            if self.algorithm is PageReplaceAlgo.FIFO:
                self._fifo.append(page)
            elif uses_history:
                self._history.setdefault(page, deque()).append(self._accesses)
            return

        finders = {
            PageReplaceAlgo.OPT: self._find_opt,
            PageReplaceAlgo.FIFO: self._find_fifo,
            PageReplaceAlgo.LRU_K: self._find_lru_k,
            PageReplaceAlgo.LFU: self._find_lfu,
        }
        victim_index = finders[self.algorithm]()
        victim = self._frames[victim_index]
        self._frames[victim_index] = page
        self._replacements += 1

        if self.algorithm is PageReplaceAlgo.FIFO:
            if victim in self._fifo:
                self._fifo.remove(victim)
            self._fifo.append(page)
        elif uses_history:
            self._history.pop(victim, None)
            self._history.setdefault(page, deque()).append(self._accesses)

    def frames(self) -> list[int]:
        """Return the pages currently held in frames, in frame order."""
        return list(self._frames)

    def page_faults(self) -> int:
        """Return the number of page faults so far."""
        return self._faults

    def replace_count(self) -> int:
        """Return the number of replacements so far."""
        return self._replacements

    def page_fault_ratio(self) -> float:
        """Return faults divided by accesses, or 0.0 before any access."""
        if self._accesses == 0:
            return 0.0
        return self._faults / self._accesses

    def _find_opt(self) -> int:
        if not self.reference:
            raise RuntimeError("reference sequence is empty")
        upcoming = self.reference[self._accesses:]

        def next_use(page: int) -> float:
            try:
                return self._accesses + upcoming.index(page)
            except ValueError:
                return math.inf

        best_index = 0
        best_distance: float = 0
        for index, page in enumerate(self._frames):
            distance = next_use(page)
            if distance > best_distance:
                best_distance = distance
                best_index = index
        return best_index

    def _find_fifo(self) -> int:
        if not self._fifo:
            raise RuntimeError("FIFO queue is empty")
        try:
            return self._frames.index(self._fifo[0])
        except ValueError:
            raise RuntimeError("FIFO page not found in frames") from None

    def _find_lru_k(self) -> int:
        best_index = 0
        min_k_time: float = math.inf
        min_count: float = math.inf
        best_last: float = math.inf

        for index, page in enumerate(self._frames):
            history = self._history.get(page, ())
            count = len(history)
            last = history[-1] if history else 0
            k_time = 0 if count < self.k else history[count - self.k]

            if k_time == 0:
                if min_k_time == 0:
                    better = count < min_count or (count == min_count and last < best_last)
                else:
                    better = True
            elif min_k_time != 0:
                better = k_time < min_k_time or (k_time == min_k_time and last < best_last)
            else:
                better = False

            if better:
                min_k_time = k_time
                min_count = count
                best_last = last
                best_index = index
        return best_index

    def _find_lfu(self) -> int:
        best_index = 0
        min_freq: float = math.inf
        best_last: float = math.inf

        for index, page in enumerate(self._frames):
            history = self._history.get(page, ())
            count = len(history)
            last = history[-1] if history else 0
            if count < min_freq or (count == min_freq and last < best_last):
                min_freq = count
                best_last = last
                best_index = index
        return best_index