"""Comparison sorts: insertion sort, merge sort and heap sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted ascending by insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted ascending by top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _sift_down(heap: list[Any], size: int, i: int) -> None:
    while True:
        largest = i
        left = 2 * i + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == i:
            return
        heap[i], heap[largest] = heap[largest], heap[i]
        i = largest


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return the values arranged as a max-heap: each item is at least its children.

    Children of index i sit at 2i+1 and 2i+2.
    """
    heap = list(values)
    for i in range(len(heap) // 2 - 1, -1, -1):
        _sift_down(heap, len(heap), i)
    return heap


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values sorted ascending by heap sort."""
    heap = build_max_heap(values)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap