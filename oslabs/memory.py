"""First-fit contiguous memory allocation with coalescing on release."""

from __future__ import annotations

from dataclasses import dataclass, replace

MEMORY_SIZE = 1024


@dataclass
class MemoryBlock:
    """A contiguous region of memory, either free or held by a job."""

    start: int
    size: int
    is_free: bool
    job_id: int | None = None

    def describe(self) -> str:
        """Return a human-readable description of the block."""
        job = "None" if self.job_id is None else str(self.job_id)
        return (
            f"Start: {self.start}\n"
            f"Size: {self.size}\n"
            f"{'Yes' if self.is_free else 'No'}, JobID: {job}"
        )


class MemoryManager:
    """Manages a fixed memory region as an ordered list of blocks."""

    def __init__(self, size: int = MEMORY_SIZE) -> None:
        self._blocks: list[MemoryBlock] = [MemoryBlock(0, size, True, None)]

    def allocate(self, job_id: int, size: int) -> bool:
        """Give ``size`` units to ``job_id`` from the first free block that fits."""
        for index, block in enumerate(self._blocks):
            if block.is_free and block.size >= size:
                if block.size > size:
                    rest = MemoryBlock(block.start + size, block.size - size, True, None)
                    self._blocks.insert(index + 1, rest)
                    block.size = size
                block.job_id = job_id
                block.is_free = False
                return True
        return False

    def free(self, job_id: int) -> bool:
        """Release the block held by ``job_id``, merging with free neighbours."""
        for index, block in enumerate(self._blocks):
            if block.is_free or block.job_id != job_id:
                continue
            block.is_free = True
            block.job_id = None

            if index > 0:
                prev = self._blocks[index - 1]
                if prev.is_free and prev.start + prev.size == block.start:
                    prev.size += block.size
                    del self._blocks[index]
                    index -= 1
                    block = prev

            if index + 1 < len(self._blocks):
                nxt = self._blocks[index + 1]
                if nxt.is_free and block.start + block.size == nxt.start:
                    block.size += nxt.size
                    del self._blocks[index + 1]
            return True
        return False

    def blocks(self) -> list[MemoryBlock]:
        """Return copies of the blocks in address order."""
        return [replace(block) for block in self._blocks]

    def describe(self) -> str:
        """Return a description of the whole memory state."""
        lines = ["Memory status:"]
        lines.extend(block.describe() for block in self._blocks)
        return "\n".join(lines) + "\n"