"""String checks: palindromes and the longest run of distinct characters."""

from __future__ import annotations


def is_palindrome(text: str) -> bool:
    """Tell whether text reads the same forwards and backwards, case-sensitively."""
    stack = list(text)
    return all(stack.pop() == ch for ch in text)


def longest_unique_substring(text: str) -> str:
    """Return the first longest substring in which no character repeats.

    Scanning stops at a repeated character and resumes just past that
    character's earlier occurrence in the current window.
    """
    best = ""
    start = 0
    while start < len(text):
        seen: dict[str, int] = {}
        pos = start
        while pos < len(text) and text[pos] not in seen:
            seen[text[pos]] = pos
            pos += 1
        if pos - start > len(best):
            best = text[start:pos]
        if pos == len(text):
            break
        start = seen[text[pos]] + 1
    return best