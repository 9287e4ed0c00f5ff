"""Classic algorithms and data structures, grouped by topic."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "dynamic",
    "graphs",
    "heaps",
    "linked_lists",
    "numbers",
    "stacks_queues",
    "strings",
    "trees",
]