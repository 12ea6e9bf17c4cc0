import random

import pytest

from wordlenet.words import DailyWord, WordList


class _ScriptedRng:
    def __init__(self, picks):
        self._picks = iter(picks)

    def choice(self, seq):
        return seq[next(self._picks)]


class _Clock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def test_from_file_truncates_and_skips_blank(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple\nbrick\n\ncrane\r\n")
    words = WordList.from_file(path)
    assert len(words) == 3
    assert "crane" in words
    assert "apple" in words


def test_from_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        WordList.from_file(tmp_path / "absent.txt")


def test_contains_is_exact():
    words = WordList(["apple", "brick"])
    assert "apple" in words
    assert "apples" not in words
    assert "APPLE" not in words


def test_choose_returns_member():
    words = WordList(["apple", "angle", "brick", "crane"])
    rng = random.Random(3)
    picks = {words.choose(rng) for _ in range(50)}
    assert picks <= {"apple", "angle", "brick", "crane"}
    assert len(picks) > 1


def test_choose_empty_raises():
    with pytest.raises(ValueError):
        WordList([]).choose(random.Random(0))


def test_choose_picks_letter_then_word():
    words = WordList(["apple", "angle", "brick"])
    assert words.choose(_ScriptedRng([0, 1])) == "angle"
    assert words.choose(_ScriptedRng([1, 0])) == "brick"


def test_daily_word_keeps_word_within_period():
    clock = _Clock(1000)
    daily = DailyWord(WordList(["apple", "brick"]), clock,
                      _ScriptedRng([0, 0, 1, 0]), period_ms=100)
    assert daily.current() == "apple"
    clock.now = 1099
    assert daily.current() == "apple"


def test_daily_word_refreshes_after_period():
    clock = _Clock(1000)
    daily = DailyWord(WordList(["apple", "brick"]), clock,
                      _ScriptedRng([0, 0, 1, 0]), period_ms=100)
    clock.now = 1100
    assert daily.current() == "brick"
    clock.now = 1150
    assert daily.current() == "brick"


def test_daily_word_explicit_refresh():
    clock = _Clock(0)
    daily = DailyWord(WordList(["apple", "brick"]), clock,
                      _ScriptedRng([0, 0, 1, 0]), period_ms=100)
    assert daily.refresh() == "brick"
    assert daily.word == "brick"


def test_daily_word_default_period():
    daily = DailyWord(WordList(["apple"]), _Clock(0), random.Random(1))
    assert daily.period_ms == 864e7
    assert daily.current() == "apple"