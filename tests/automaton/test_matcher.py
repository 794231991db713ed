"""Tests for the scan functions on a bare trie, and the naive baseline."""

import random

import pytest

from patternscan.automaton.compiler import build_failure_links
from patternscan.automaton.matcher import Match, iter_matches, scan
from patternscan.automaton.naive import naive_search
from patternscan.automaton.trie import PatternTrie

from tests.automaton.conftest import CLASSIC_PATTERNS, OVERLAP_PATTERNS, SEED


def _compiled(patterns) -> PatternTrie:
    t = PatternTrie()
    for p in patterns:
        t.insert(p)
    build_failure_links(t.root)
    return t


class TestScan:

    def test_scan_classic(self):
        t = _compiled(CLASSIC_PATTERNS)
        assert scan(t.root, "ushers") == {"she": [1], "he": [2], "hers": [2]}

    def test_positions_increasing(self):
        t = _compiled(OVERLAP_PATTERNS)
        for positions in scan(t.root, "abccab" * 20).values():
            assert positions == sorted(positions)
            assert len(positions) == len(set(positions))

    def test_mismatch_returns_to_root(self):
        t = _compiled(["abc"])
        # "ab" then mismatch on "x" must not skip the following "abc"
        assert scan(t.root, "abxabc") == {"abc": [3]}

    def test_failure_link_restart(self):
        t = _compiled(["aab"])
        # after "aa" + "a", the automaton keeps the "aa" suffix
        assert scan(t.root, "aaab") == {"aab": [1]}

    def test_match_is_frozen(self):
        m = Match("he", 0, 2)
        with pytest.raises(AttributeError):
            m.start = 1  # type: ignore[misc]

    def test_iter_matches_end_order(self):
        t = _compiled(OVERLAP_PATTERNS)
        ends = [m.end for m in iter_matches(t.root, "abccab")]
        assert ends == sorted(ends)


class TestNaive:

    def test_naive_classic(self):
        assert naive_search(CLASSIC_PATTERNS, "ushers") == {
            "she": [1], "he": [2], "hers": [2],
        }

    def test_naive_skips_empty_and_duplicates(self):
        assert naive_search(["", "a", "a"], "aa") == {"a": [0, 1]}

    def test_naive_no_match(self):
        assert naive_search(["abc"], "ab") == {}


class TestAgainstNaive:
    """Randomized cross-check of the automaton against brute force."""

    @pytest.mark.parametrize("seed", range(25))
    def test_random_small_alphabet(self, seed):
        rng = random.Random(SEED * 1000 + seed)
        patterns = [
            "".join(rng.choice("abc") for _ in range(rng.randint(1, 5)))
            for _ in range(rng.randint(1, 20))
        ]
        text = "".join(rng.choice("abc") for _ in range(rng.randint(0, 300)))
        t = _compiled(patterns)
        assert scan(t.root, text) == naive_search(patterns, text)

    def test_unicode_mix(self):
        patterns = ["ß", "straße", "aße", "日本", "本", "\U0001F600x"]
        text = "straße 日本 \U0001F600x straßes"
        t = _compiled(patterns)
        assert scan(t.root, text) == naive_search(patterns, text)
