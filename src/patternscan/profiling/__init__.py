"""Profiling harness and corpus generation for patternscan."""

from patternscan.profiling.corpus import Corpus, CorpusGenerator
from patternscan.profiling.harness import ScanResult, run_scan
from patternscan.profiling.report import format_match, format_matches, format_report

__all__ = [
    "Corpus",
    "CorpusGenerator",
    "ScanResult",
    "format_match",
    "format_matches",
    "format_report",
    "run_scan",
]
