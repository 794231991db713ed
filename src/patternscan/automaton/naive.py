"""Brute-force baseline: test every pattern at every offset.

O(len(text) * total pattern length). Used to cross-check the automaton
on random inputs and as the "before" column in the profiling harness.
"""

from __future__ import annotations

from collections.abc import Iterable


def naive_search(patterns: Iterable[str], text: str) -> dict[str, list[int]]:
    """Same contract as matcher.scan(), without an automaton.

    The empty pattern is skipped, matching the automaton's policy.
    """
    result: dict[str, list[int]] = {}
    for pattern in dict.fromkeys(patterns):
        if not pattern:
            continue
        positions = [
            i for i in range(len(text) - len(pattern) + 1)
            if text.startswith(pattern, i)
        ]
        if positions:
            result[pattern] = positions
    return result
