"""Concurrent read-only searches over one built automaton.

Once built, searches never write to the automaton, so threads can
share it without a lock.
"""
from __future__ import annotations

import random
import threading
from concurrent.futures import ThreadPoolExecutor

from patternscan.automaton.aho_corasick import AhoCorasick

from tests.automaton.conftest import OVERLAP_PATTERNS, SEED


def _texts(count: int) -> list[str]:
    rng = random.Random(SEED)
    return [
        "".join(rng.choice("abc") for _ in range(rng.randint(0, 500)))
        for _ in range(count)
    ]


def test_parallel_searches_match_sequential():
    ac = AhoCorasick(OVERLAP_PATTERNS)
    ac.build()
    texts = _texts(200)
    expected = [ac.search(t) for t in texts]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(ac.search, texts))

    assert results == expected


def test_interleaved_finditer_generators():
    """Two live scans over the same automaton keep separate state."""
    ac = AhoCorasick(["ab", "b"])
    ac.build()
    first = ac.finditer("abab")
    second = ac.finditer("bbb")
    assert next(first).pattern == "ab"
    assert next(second).pattern == "b"
    assert [m.start for m in first] == [1, 2, 3]
    assert [m.start for m in second] == [1, 2]


def test_readers_start_together():
    ac = AhoCorasick(["he", "she", "his", "hers"])
    ac.build()
    barrier = threading.Barrier(10)
    results: list[dict[str, list[int]]] = []
    lock = threading.Lock()

    def reader():
        barrier.wait(timeout=5.0)
        found = ac.search("ushers" * 100)
        with lock:
            results.append(found)

    threads = [threading.Thread(target=reader) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10.0)

    assert len(results) == 10
    assert all(r == results[0] for r in results)
    assert results[0]["she"][:2] == [1, 7]
