"""Operating-system algorithms: banker's algorithm, first-fit memory allocation and page replacement."""

__version__ = "0.1.0"
__all__ = ["banker", "memory", "paging"]