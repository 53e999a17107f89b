"""In-place comparison sorts on mutable sequences."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort in place, stopping early once a pass makes no swap."""
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def _insertion_sort_range(items: MutableSequence[Any], left: int, right: int) -> None:
    for i in range(left + 1, right + 1):
        key = items[i]
        j = i - 1
        while j >= left and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by insertion."""
    _insertion_sort_range(items, 0, len(items) - 1)


def _merge(
    items: MutableSequence[Any], left: int, mid: int, right: int, stable: bool
) -> None:
    lower = list(items[left : mid + 1])
    upper = list(items[mid + 1 : right + 1])
    merged = []
    i = j = 0
    while i < len(lower) and j < len(upper):
        take_lower = lower[i] <= upper[j] if stable else lower[i] < upper[j]
        if take_lower:
            merged.append(lower[i])
            i += 1
        else:
            merged.append(upper[j])
            j += 1
    merged.extend(lower[i:])
    merged.extend(upper[j:])
    items[left : right + 1] = merged


def _merge_sort_range(
    items: MutableSequence[Any], left: int, right: int, threshold: int, stable: bool
) -> None:
    if left >= right:
        return
    if right - left + 1 <= threshold:
        _insertion_sort_range(items, left, right)
        return
    mid = left + (right - left) // 2
    _merge_sort_range(items, left, mid, threshold, stable)
    _merge_sort_range(items, mid + 1, right, threshold, stable)
    _merge(items, left, mid, right, stable)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Stable top-down merge sort, in place."""
    _merge_sort_range(items, 0, len(items) - 1, 0, True)


def hybrid_merge_sort(items: MutableSequence[Any], threshold: int = 10) -> None:
    """Merge sort that switches to insertion sort for runs of at most threshold items."""
    _merge_sort_range(items, 0, len(items) - 1, threshold, False)