"""Character-level pattern trie (the goto function of the automaton).

Each pattern is inserted one code point at a time. Python strings are
sequences of code points, so iterating a str never splits a multi-byte
character. Every node corresponds to exactly one prefix of the
inserted pattern set, and the path from the root to a node spells
that prefix.

The trie only knows about forward edges. Failure links are added by
compiler.build_failure_links() and are never followed here.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from patternscan.automaton.node import ACNode


class PatternTrie:
    """Prefix tree over the inserted patterns.

    Usage:
        trie = PatternTrie()
        trie.insert("he")
        trie.insert("hers")
        trie.node_count()  # root, h, he, her, hers = 5
    """

    def __init__(self) -> None:
        self._root = ACNode()
        self._patterns: list[str] = []

    @property
    def root(self) -> ACNode:
        return self._root

    @property
    def pattern_count(self) -> int:
        return len(self._patterns)

    @property
    def patterns(self) -> list[str]:
        """Distinct inserted patterns, in first-insertion order."""
        return list(self._patterns)

    def insert(self, pattern: str) -> ACNode:
        """Insert a pattern and return its terminal node.

        Re-inserting a pattern that is already present changes nothing.
        The empty pattern marks the root itself as terminal.
        """
        if not isinstance(pattern, str):
            raise TypeError(
                f"pattern must be str, not {type(pattern).__name__}"
            )
        node = self._root
        for ch in pattern:
            child = node.children.get(ch)
            if child is None:
                child = ACNode(depth=node.depth + 1)
                node.children[ch] = child
            node = child
        if node.pattern is None:
            node.pattern = pattern
            self._patterns.append(pattern)
        return node

    def node_count(self) -> int:
        """Count states reachable through forward edges, root included."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def iter_states(self) -> Iterator[tuple[str, ACNode]]:
        """Yield (prefix, node) for every state in breadth-first order.

        The prefix is rebuilt from the edge labels on the way down, so
        it reflects the tree structure alone.
        """
        queue: deque[tuple[str, ACNode]] = deque([("", self._root)])
        while queue:
            prefix, node = queue.popleft()
            yield prefix, node
            for ch, child in node.children.items():
                queue.append((prefix + ch, child))
