"""Seeded pattern sets and texts for profiling and randomized tests.

Patterns are drawn from a small alphabet so they share prefixes and
suffixes heavily. That is the case where failure links matter: with a
large alphabet most scans stay at the root and the automaton looks
trivially correct.

About half of the patterns are planted into the text so that every
run has real matches to report, including overlapping ones.
"""
from __future__ import annotations

import random
from dataclasses import dataclass

DEFAULT_ALPHABET = "abcd"


@dataclass(slots=True)
class Corpus:
    """A pattern set plus the text to scan with it."""
    patterns: list[str]
    text: str
    seed: int


class CorpusGenerator:
    """Generate reproducible pattern/text pairs."""

    __slots__ = (
        "_rng", "_alphabet", "_num_patterns",
        "_min_length", "_max_length", "_text_length", "_seed",
    )

    def __init__(
        self,
        num_patterns: int = 200,
        min_length: int = 1,
        max_length: int = 8,
        text_length: int = 100_000,
        alphabet: str = DEFAULT_ALPHABET,
        seed: int = 42,
    ) -> None:
        if num_patterns < 1:
            raise ValueError("num_patterns must be at least 1")
        if min_length < 1 or max_length < min_length:
            raise ValueError(
                f"invalid pattern length range [{min_length}, {max_length}]"
            )
        if text_length < 0:
            raise ValueError("text_length must be non-negative")
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        self._rng = random.Random(seed)
        self._alphabet = alphabet
        self._num_patterns = num_patterns
        self._min_length = min_length
        self._max_length = max_length
        self._text_length = text_length
        self._seed = seed

    def _random_string(self, length: int) -> str:
        return "".join(self._rng.choice(self._alphabet) for _ in range(length))

    def generate_patterns(self) -> list[str]:
        """Return num_patterns strings (duplicates possible)."""
        return [
            self._random_string(
                self._rng.randint(self._min_length, self._max_length)
            )
            for _ in range(self._num_patterns)
        ]

    def generate_text(self, patterns: list[str]) -> str:
        """Random text with some of the patterns copied in verbatim."""
        chars = list(self._random_string(self._text_length))
        if not patterns or not chars:
            return "".join(chars)
        planted = self._rng.sample(patterns, k=max(1, len(patterns) // 2))
        for pattern in planted:
            if len(pattern) > len(chars):
                continue
            pos = self._rng.randint(0, len(chars) - len(pattern))
            chars[pos:pos + len(pattern)] = pattern
        return "".join(chars)

    def generate(self) -> Corpus:
        patterns = self.generate_patterns()
        return Corpus(
            patterns=patterns,
            text=self.generate_text(patterns),
            seed=self._seed,
        )
