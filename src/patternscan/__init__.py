"""patternscan: multi-pattern string matching with an Aho-Corasick automaton."""

from patternscan.automaton import AhoCorasick, AutomatonNotBuiltError, Match

__all__ = [
    "AhoCorasick",
    "AutomatonNotBuiltError",
    "Match",
]
