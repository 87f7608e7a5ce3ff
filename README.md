# oslabs

Small implementations of three classic operating-system algorithms that stand
on their own. They are meant for study and experimentation:

- `oslabs.banker`: the banker's algorithm for deadlock avoidance
- `oslabs.memory`: a first-fit contiguous memory allocator that merges free blocks
- `oslabs.paging`: page replacement with the OPT, FIFO, LRU-K and LFU policies

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Banker's algorithm

```python
from oslabs.banker import BankerAlgorithm

banker = BankerAlgorithm(5, 3)
banker.set_available([3, 3, 2])
banker.set_maximum([[7, 4, 3], [3, 3, 2], [7, 0, 2], [2, 2, 2], [4, 3, 3]])
banker.set_allocation([[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]])

banker.is_safe()          # True
banker.safe_sequence()    # [1, 2, 3, 4, 0]

banker.request_resources(0, [1, 1, 0])  # True if granting it leaves the system safe
```

Set the maximum claims before you set the allocation. The remaining need of
each process is calculated at the moment the allocation is set.

`is_safe` records the safe sequence it finds, which `safe_sequence` then
returns. If the state is unsafe, the recorded sequence is empty.

`request_resources` checks whether a request could be granted safely and then
puts the state back as it was. It returns `False` in any of these cases:

- the process number is out of range
- the request has the wrong length
- any amount is negative
- any amount exceeds the process's need or the available resources
- granting the request would leave the system unsafe

## Memory allocation

```python
from oslabs.memory import MemoryManager

manager = MemoryManager()  # 1024 units by default (oslabs.memory.MEMORY_SIZE)
manager.allocate(1, 100)   # True
manager.allocate(2, 200)   # True
manager.free(1)            # True
manager.free(42)           # False, no such job

for block in manager.blocks():
    print(block.start, block.size, block.is_free, block.job_id)

print(manager.describe())
```

Allocation is first fit. The first free block that is large enough is used,
and any remainder is split off as a new free block.

When a block is freed, it is merged with an adjacent free block on either
side. `blocks()` returns copies of the `MemoryBlock` records in address order.
`MemoryBlock.describe()` and `MemoryManager.describe()` return text summaries.

## Page replacement

```python
from oslabs.paging import PageReplaceAlgo, PageReplacer

reference = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]
replacer = PageReplacer(PageReplaceAlgo.LRU_K, 3, 2, reference)

for page in reference:
    replacer.access_page(page)

replacer.frames()            # pages currently resident, in frame order
replacer.page_faults()       # number of page faults
replacer.replace_count()     # number of evictions
replacer.page_fault_ratio()  # faults / accesses (0.0 before any access)
```

The available policies are:

- `PageReplaceAlgo.OPT`
- `PageReplaceAlgo.FIFO`
- `PageReplaceAlgo.LRU_K`
- `PageReplaceAlgo.LFU`

For LRU-K and LFU, each page keeps a history of its access times. On a hit,
that history is trimmed to `k` entries.

OPT looks ahead in the reference string to choose a victim. The reference
string is required for every policy, even though only OPT uses it.

The constructor raises `ValueError` in these cases:

- the frame capacity is zero
- the reference string is `None`
- `k` is below 1 with LRU-K

## What this package does not do

This is a library only. It provides no command-line program, and it does not
store or load any state.