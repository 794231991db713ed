"""Report generation for harness results."""
from __future__ import annotations

from patternscan.automaton.matcher import Match
from patternscan.profiling.harness import ScanResult


def _pct(part: float, whole: float) -> str:
    if whole <= 0:
        return "n/a"
    return f"{part / whole * 100:.1f}%"


def format_report(result: ScanResult, label: str = "Aho-Corasick") -> str:
    """Format a ScanResult as a readable report string."""
    automaton_ms = (
        result.insert_time_ms + result.build_time_ms + result.scan_time_ms
    )
    speedup = (
        f"{result.naive_time_ms / result.scan_time_ms:.1f}x"
        if result.scan_time_ms > 0 else "inf"
    )
    lines = [
        f"=== {label} ===",
        f"Patterns:          {result.num_patterns:,}",
        f"States:            {result.states:,}",
        f"Text length:       {result.text_length:,}",
        f"Matches:           {result.total_matches:,}",
        f"Throughput:        {result.chars_per_sec:,.0f} chars/sec",
        "",
        "Breakdown:",
        f"  Insert:          {result.insert_time_ms:.1f} ms "
        f"({_pct(result.insert_time_ms, automaton_ms)})",
        f"  Build:           {result.build_time_ms:.1f} ms "
        f"({_pct(result.build_time_ms, automaton_ms)})",
        f"  Scan:            {result.scan_time_ms:.1f} ms "
        f"({_pct(result.scan_time_ms, automaton_ms)})",
        f"  Naive scan:      {result.naive_time_ms:.1f} ms",
        f"  Scan speedup:    {speedup}",
        f"  Results agree:   {'yes' if result.results_agree else 'NO'}",
    ]
    return "\n".join(lines)


def format_matches(matches: dict[str, list[int]]) -> str:
    """One line per occurrence, grouped by pattern."""
    lines = ["Matches found:"]
    for pattern, positions in matches.items():
        for index in positions:
            lines.append(f"\tPattern {pattern!r} found at index {index}")
    return "\n".join(lines)


def format_match(m: Match) -> str:
    return f"{m.start}\t{m.end}\t{m.pattern}"
