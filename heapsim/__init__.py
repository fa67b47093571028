"""A simulated first-fit heap allocator and data structures built on it."""

__version__ = "0.1.0"
__all__ = ["heap", "linked_list", "matrix", "dynamic_array"]