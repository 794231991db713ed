"""Aho-Corasick automaton for multi-pattern substring search.

The classic Aho-Corasick algorithm (1975) builds a finite automaton
from a set of patterns and then scans an input string in a single
pass, reporting every occurrence of every pattern. It has three
phases:

    1. Build the goto trie: insert each pattern character by
       character (trie.PatternTrie).
    2. Compute failure links (BFS from root): when a match fails at
       a node, the failure link points to the longest proper suffix
       of the current path that is also a prefix of some pattern
       (compiler.build_failure_links).
    3. Compute output links: each node's output is its own pattern
       (if any) plus the patterns reachable via its failure link
       chain. This is done in the same BFS pass as phase 2.

Scanning (matcher.iter_matches) then costs O(len(text) + matches):
each character either advances one edge or follows failure links,
and failure-link steps are paid for by earlier advances.

Overlapping and nested occurrences are all reported. Searching
"ushers" for {"he", "she", "his", "hers"} gives
{"she": [1], "he": [2], "hers": [2]}.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from patternscan.automaton.compiler import build_failure_links
from patternscan.automaton.matcher import Match, iter_matches, scan
from patternscan.automaton.node import ACNode
from patternscan.automaton.trie import PatternTrie

log = logging.getLogger(__name__)


class AutomatonNotBuiltError(RuntimeError):
    """Raised when searching before build(), or after adding patterns
    without rebuilding."""


class AhoCorasick:
    """Multi-pattern matcher over Unicode code points.

    Usage:
        ac = AhoCorasick()
        ac.add_pattern("he")
        ac.add_pattern("she")
        ac.build()  # MUST call before searching
        ac.search("ushers")
        # {"she": [1], "he": [2]}

    Calling add_pattern() after build() invalidates the automaton; you
    must call build() again, which recomputes all failure links from
    scratch.

    The empty pattern may be added but is never reported.

    Once built, search(), finditer() and count() only read the
    automaton and can run from many threads at once. Adding patterns
    or rebuilding while a search is in progress is not supported.
    """

    def __init__(self, patterns: Iterable[str] | None = None) -> None:
        self._trie = PatternTrie()
        self._built = False
        if patterns is not None:
            self.add_patterns(patterns)

    @property
    def pattern_count(self) -> int:
        return self._trie.pattern_count

    @property
    def patterns(self) -> list[str]:
        return self._trie.patterns

    @property
    def is_built(self) -> bool:
        return self._built

    @property
    def root(self) -> ACNode:
        return self._trie.root

    def add_pattern(self, pattern: str) -> None:
        """Insert a pattern into the goto trie."""
        self._trie.insert(pattern)
        self._built = False

    def add_patterns(self, patterns: Iterable[str]) -> None:
        for pattern in patterns:
            self.add_pattern(pattern)

    def build(self) -> None:
        """Compute failure links and propagate output sets."""
        states = build_failure_links(self._trie.root)
        self._built = True
        log.debug(
            "built automaton: %d patterns, %d states",
            self._trie.pattern_count, states,
        )

    def search(self, text: str) -> dict[str, list[int]]:
        """Return {pattern: [start offsets]} for every pattern found.

        Offsets are zero-based code point indices, increasing per
        pattern. Patterns that do not occur are not in the result.
        """
        self._check_built("search")
        return scan(self._trie.root, text)

    def finditer(self, text: str) -> Iterator[Match]:
        """Yield Match objects lazily, ordered by end position."""
        self._check_built("finditer")
        return iter_matches(self._trie.root, text)

    def count(self, text: str) -> dict[str, int]:
        """Return {pattern: number of occurrences} for patterns found."""
        self._check_built("count")
        counts: dict[str, int] = {}
        for m in iter_matches(self._trie.root, text):
            counts[m.pattern] = counts.get(m.pattern, 0) + 1
        return counts

    def node_count(self) -> int:
        """Count total states in the automaton."""
        return self._trie.node_count()

    def states(self) -> Iterator[tuple[str, ACNode]]:
        """Yield (prefix, node) for every state, breadth-first."""
        return self._trie.iter_states()

    def _check_built(self, caller: str) -> None:
        if not self._built:
            raise AutomatonNotBuiltError(
                f"Must call build() before {caller}()"
            )
