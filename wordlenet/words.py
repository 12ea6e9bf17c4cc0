"""The dictionary of five-letter words and the periodically chosen answer."""

from __future__ import annotations

import os
import random
import time
from collections.abc import Callable, Iterable

WORD_LENGTH = 5
DEFAULT_PERIOD_MS = 8_640_000_000


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class WordList:
    """Known words, grouped by their first letter."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words = tuple(words)
        self._known = frozenset(self._words)
        self._buckets: dict[str, list[str]] = {}
        for word in self._words:
            self._buckets.setdefault(word[:1], []).append(word)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> WordList:
        """Read one word per line, keeping the first five characters."""
        with open(path) as fh:
            words = [line.strip()[:WORD_LENGTH] for line in fh if line.strip()]
        return cls(words)

    def __contains__(self, word: object) -> bool:
        return word in self._known

    def __len__(self) -> int:
        return len(self._words)

    def choose(self, rng: random.Random) -> str:
        """Pick a letter at random, then a word starting with it."""
        if not self._buckets:
            raise ValueError("word list is empty")
        bucket = self._buckets[rng.choice(list(self._buckets))]
        return rng.choice(bucket)


class DailyWord:
    """The current answer, replaced once its period has elapsed."""

    def __init__(
        self,
        words: WordList,
        clock: Callable[[], int] | None = None,
        rng: random.Random | None = None,
        period_ms: int = DEFAULT_PERIOD_MS,
    ) -> None:
        self._words = words
        self._clock = clock or _now_ms
        self._rng = rng or random.Random()
        self.period_ms = period_ms
        self.word = ""
        self._since = 0
        self.refresh()

    def current(self) -> str:
        if self._clock() - self._since >= self.period_ms:
            self.refresh()
        return self.word

    def refresh(self) -> str:
        self.word = self._words.choose(self._rng)
        self._since = self._clock()
        return self.word