"""Verification benchmark programs over wrapping 64-bit unsigned integers."""

__version__ = "0.1.0"
__all__ = [
    "uint64",
    "recursion",
    "loops",
    "search",
    "strings",
    "graphs",
    "sorting_simple",
    "sorting_divide",
]