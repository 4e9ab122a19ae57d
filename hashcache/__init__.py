"""Hash dictionary, bounded cache, container types and helpers for timing dictionary workloads."""

__version__ = "0.1.0"

__all__ = [
    "array_sequence",
    "dictionary",
    "dynamic_array",
    "linked_list",
    "lru_cache",
    "operations",
    "records",
    "session",
    "workbench",
]