"""Character, memory, string, formatting, linked-list and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "strings",
    "textops",
    "output",
    "printf",
    "linkedlist",
    "lines",
]