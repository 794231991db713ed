"""Shared fixtures for automaton tests."""

from __future__ import annotations

import pytest

from patternscan.automaton.aho_corasick import AhoCorasick
from patternscan.automaton.node import ACNode
from patternscan.automaton.trie import PatternTrie

SEED = 42

CLASSIC_PATTERNS = ["he", "she", "his", "hers"]
OVERLAP_PATTERNS = ["a", "ab", "bab", "bc", "bca", "c", "caa"]


def states_by_prefix(trie: PatternTrie) -> dict[str, ACNode]:
    """Map every prefix in the trie to its node."""
    return dict(trie.iter_states())


def snapshot(trie: PatternTrie) -> dict[str, tuple[str, tuple[str, ...]]]:
    """Capture {prefix: (failure target prefix, sorted outputs)}.

    Failure targets are recorded by prefix, not identity, so snapshots
    of two separately built tries can be compared.
    """
    prefix_of = {id(node): prefix for prefix, node in trie.iter_states()}
    return {
        prefix: (prefix_of[id(node.fail)], tuple(sorted(node.output)))
        for prefix, node in trie.iter_states()
    }


@pytest.fixture
def classic_ac() -> AhoCorasick:
    ac = AhoCorasick(CLASSIC_PATTERNS)
    ac.build()
    return ac


@pytest.fixture
def overlap_ac() -> AhoCorasick:
    ac = AhoCorasick(OVERLAP_PATTERNS)
    ac.build()
    return ac
