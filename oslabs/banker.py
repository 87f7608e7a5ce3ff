"""Banker's algorithm for deadlock avoidance."""

from __future__ import annotations

from collections.abc import Sequence


class BankerAlgorithm:
    """Tracks resource state for a set of processes and checks for safe states."""

    def __init__(self, processes: int, resources: int) -> None:
        self.processes = processes
        self.resources = resources
        self.available: list[int] = [0] * resources
        self.maximum: list[list[int]] = [[0] * resources for _ in range(processes)]
        self.need: list[list[int]] = [[0] * resources for _ in range(processes)]
        self.allocation: list[list[int]] = [[0] * resources for _ in range(processes)]
        self._safe_sequence: list[int] = []

    def set_available(self, available: Sequence[int]) -> None:
        """Set the vector of currently available resources."""
        self.available = list(available)

    def set_maximum(self, maximum: Sequence[Sequence[int]]) -> None:
        """Set the maximum demand matrix."""
        self.maximum = [list(row) for row in maximum]

    def set_allocation(self, allocation: Sequence[Sequence[int]]) -> None:
        """Set the allocation matrix and derive the need matrix from it."""
        self.allocation = [list(row) for row in allocation]
        self.need = [
            [most - held for most, held in zip(max_row, alloc_row)]
            for max_row, alloc_row in zip(self.maximum, self.allocation)
        ]

    def is_safe(self) -> bool:
        """Return whether the current state is safe, recording a safe sequence."""
        self._safe_sequence = []
        work = list(self.available)
        finished = [False] * self.processes

        while len(self._safe_sequence) < self.processes:
            progressed = False
            for proc, (need_row, alloc_row) in enumerate(zip(self.need, self.allocation)):
                if finished[proc]:
                    continue
                if all(need <= have for need, have in zip(need_row, work)):
                    work = [have + held for have, held in zip(work, alloc_row)]
                    finished[proc] = True
                    self._safe_sequence.append(proc)
                    progressed = True
            if not progressed:
                self._safe_sequence = []
                return False
        return True

    def request_resources(self, process: int, request: Sequence[int]) -> bool:
        """Return whether granting ``request`` to ``process`` would leave a safe state.

        The state is evaluated tentatively and restored afterwards.
        """
        request = list(request)
        if not 0 <= process < self.processes or len(request) != self.resources:
            return False

        need_row = self.need[process]
        for amount, need, have in zip(request, need_row, self.available):
            if amount > need or amount > have or amount < 0:
                return False

        alloc_row = self.allocation[process]
        for j, amount in enumerate(request):
            self.available[j] -= amount
            alloc_row[j] += amount
            need_row[j] -= amount
        try:
            return self.is_safe()
        finally:
            for j, amount in enumerate(request):
                self.available[j] += amount
                alloc_row[j] -= amount
                need_row[j] += amount

    def safe_sequence(self) -> list[int]:
        """Return the safe sequence found by the last safety check."""
        return list(self._safe_sequence)