"""Helpers for characters, strings, byte buffers, linked lists, stream output, printf-style formatting and integer stacks."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "convert",
    "search",
    "transform",
    "memory",
    "linked_list",
    "output",
    "printf",
    "stack",
]