"""Single-pass scanning over a compiled automaton.

The scan keeps exactly one piece of state, the current node, and
never writes to the automaton. Any number of scans may run over the
same compiled automaton at once.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from patternscan.automaton.node import ACNode


@dataclass(frozen=True, slots=True)
class Match:
    """One occurrence of a pattern in the scanned text."""
    pattern: str
    start: int
    end: int  # exclusive


def iter_matches(root: ACNode, text: str) -> Iterator[Match]:
    """Yield every occurrence of every pattern, ordered by end position.

    Occurrences that end at the same index come out longest pattern
    first (the node's own pattern, then those inherited through its
    failure chain).

    The caller must have run build_failure_links(root) on the current
    trie contents.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")
    node = root
    for i, ch in enumerate(text):
        while node is not root and ch not in node.children:
            node = node.fail  # type: ignore[assignment]
        node = node.children.get(ch, root)
        for pattern in node.output:
            yield Match(pattern, i - len(pattern) + 1, i + 1)


def scan(root: ACNode, text: str) -> dict[str, list[int]]:
    """Map each pattern that occurs in text to its sorted start offsets.

    Patterns with no occurrence are absent from the result. Offsets
    come out increasing because the text is read left to right.
    """
    result: dict[str, list[int]] = {}
    for m in iter_matches(root, text):
        result.setdefault(m.pattern, []).append(m.start)
    return result
