"""Trie construction, failure-link compilation, and single-pass scanning."""

from patternscan.automaton.aho_corasick import AhoCorasick, AutomatonNotBuiltError
from patternscan.automaton.compiler import build_failure_links
from patternscan.automaton.matcher import Match, iter_matches, scan
from patternscan.automaton.naive import naive_search
from patternscan.automaton.node import ACNode
from patternscan.automaton.trie import PatternTrie

__all__ = [
    "ACNode",
    "AhoCorasick",
    "AutomatonNotBuiltError",
    "Match",
    "PatternTrie",
    "build_failure_links",
    "iter_matches",
    "naive_search",
    "scan",
]
