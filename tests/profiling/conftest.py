"""Shared fixtures for profiling tests."""
from __future__ import annotations

import pytest

from patternscan.profiling.harness import ScanResult, run_scan


@pytest.fixture
def small_result() -> ScanResult:
    return run_scan(num_patterns=30, text_length=2_000, seed=7)
