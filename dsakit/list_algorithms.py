"""Sorting, digit-list arithmetic and prime filtering over sequences of integers."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import zip_longest


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending by bubble sort, stopping early once ordered."""
    items = list(values)
    end = len(items) - 1
    while end > 0:
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
        end -= 1
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending by selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def find_max(values: Iterable[int]) -> int:
    """Return the largest value."""
    items = list(values)
    if not items:
        raise ValueError("find_max of empty sequence")
    return max(items)


def digits_of(number: int) -> list[int]:
    """Split a non-negative integer into its decimal digits, most significant first."""
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return [0]
    digits: list[int] = []
    while number:
        number, digit = divmod(number, 10)
        digits.insert(0, digit)
    return digits


def add_digit_lists(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Add two numbers given as digit lists (most significant first)."""
    result: list[int] = []
    carry = 0
    for a, b in zip_longest(reversed(list(first)), reversed(list(second)), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        result.insert(0, digit)
    if carry:
        result.insert(0, carry)
    return result


def is_prime(number: int) -> bool:
    """Tell whether number is prime."""
    if number < 2:
        return False
    return all(number % d for d in range(2, math.isqrt(number) + 1))


def primes_in(values: Iterable[int]) -> list[int]:
    """Return the primes among values, in their original order."""
    return [value for value in values if is_prime(value)]