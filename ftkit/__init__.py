"""Helpers for characters, buffers, numbers, text, tokenizing, lists, output, dynamic strings and processes."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "tokenize",
    "numbers",
    "environ",
    "text",
    "linkedlist",
    "output",
    "dynstring",
]