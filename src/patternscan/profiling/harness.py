"""Timing harness: automaton scan vs. brute-force scan.

Generates a corpus, builds the automaton, and times three phases:
trie insertion, failure-link compilation, and scanning. The same text
is then scanned with naive_search() as the baseline, and the two
results are compared so a fast-but-wrong automaton cannot produce a
good-looking report.
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import time
from dataclasses import dataclass

from patternscan.automaton.aho_corasick import AhoCorasick
from patternscan.automaton.naive import naive_search
from patternscan.profiling.corpus import DEFAULT_ALPHABET, CorpusGenerator

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanResult:
    """Timing results from a single harness run."""
    num_patterns: int
    text_length: int
    states: int
    insert_time_ms: float
    build_time_ms: float
    scan_time_ms: float
    naive_time_ms: float
    total_matches: int
    results_agree: bool
    cprofile_stats: str | None = None

    @property
    def chars_per_sec(self) -> float:
        if self.scan_time_ms <= 0:
            return 0.0
        return self.text_length / (self.scan_time_ms / 1000)


def run_scan(
    num_patterns: int = 200,
    min_length: int = 1,
    max_length: int = 8,
    text_length: int = 100_000,
    alphabet: str = DEFAULT_ALPHABET,
    seed: int = 42,
    profile: bool = False,
) -> ScanResult:
    """Build an automaton over a generated corpus and time each phase.

    If profile=True, the automaton phases (not the naive baseline) run
    under cProfile and the top functions are included in the result.
    """
    corpus = CorpusGenerator(
        num_patterns=num_patterns,
        min_length=min_length,
        max_length=max_length,
        text_length=text_length,
        alphabet=alphabet,
        seed=seed,
    ).generate()

    ac = AhoCorasick()
    insert_ms = 0.0
    build_ms = 0.0
    scan_ms = 0.0
    found: dict[str, list[int]] = {}

    def _run() -> None:
        nonlocal insert_ms, build_ms, scan_ms, found
        t0 = time.perf_counter()
        ac.add_patterns(corpus.patterns)
        insert_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        ac.build()
        build_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        found = ac.search(corpus.text)
        scan_ms = (time.perf_counter() - t0) * 1000

    cprofile_text = None
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        _run()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(30)
        cprofile_text = s.getvalue()
    else:
        _run()

    t0 = time.perf_counter()
    expected = naive_search(corpus.patterns, corpus.text)
    naive_ms = (time.perf_counter() - t0) * 1000

    agree = found == expected
    if not agree:
        log.warning(
            "automaton and naive scan disagree (seed=%d): %d vs %d patterns",
            seed, len(found), len(expected),
        )

    return ScanResult(
        num_patterns=ac.pattern_count,
        text_length=len(corpus.text),
        states=ac.node_count(),
        insert_time_ms=insert_ms,
        build_time_ms=build_ms,
        scan_time_ms=scan_ms,
        naive_time_ms=naive_ms,
        total_matches=sum(len(v) for v in found.values()),
        results_agree=agree,
        cprofile_stats=cprofile_text,
    )
