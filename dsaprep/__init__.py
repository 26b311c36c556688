"""Classic array, subarray, searching and grid algorithms over plain lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "reorder", "grids", "subarrays", "search_and_count"]