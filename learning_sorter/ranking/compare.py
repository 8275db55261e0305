"""Comparison primitives shared by the index and the sorter."""

from typing import Any, Callable

CompareFn = Callable[[Any, Any], int]
KeyFn = Callable[[Any], str]


def compare_numbers(a, b) -> int:
    """Three-way comparison of two numbers: -1, 0 or 1."""
    return -1 if a < b else 1 if a > b else 0
