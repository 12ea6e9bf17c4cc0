"""Game rules: scoring guesses and answering the requests of a logged-in player."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from .records import MAX_ATTEMPTS, GameStatus, LoginResult, RecordStore, Stats
from .words import DailyWord

SIGNUP_OK = (
    "\nwell done!\nuser registered\nYou can now login using:\n\n"
    "\twordle login <username>:<password> <host>\n"
)
SIGNUP_EXISTS = "\ntry again: user already exists\n"
INVALID_WORD = "You must input a valid word"

_LOGIN_FAILURES = {
    LoginResult.WRONG_PASSWORD: "password does not match",
    LoginResult.NO_SUCH_USER: "user does not exists",
    LoginResult.INTERNAL_ERROR: "Internal Server Error",
}

_RESET = "\033[0m"
_DELIMITERS = re.compile("<+")


class Tile(enum.Enum):
    """Colour of one letter of a guess; the value is its background code."""

    CORRECT = "42"
    PRESENT = "43"
    ABSENT = "30"


def score_guess(guess: str, answer: str) -> list[Tile]:
    """Colour each letter: right place, elsewhere in the answer, or absent."""
    tiles = []
    for letter, expected in zip(guess, answer):
        if letter == expected:
            tiles.append(Tile.CORRECT)
        elif letter in answer:
            tiles.append(Tile.PRESENT)
        else:
            tiles.append(Tile.ABSENT)
    return tiles


def render_guess(guess: str, answer: str) -> str:
    """One board line with each letter on its colour."""
    return "".join(
        f"\033[30;{tile.value}m {letter} {_RESET}"
        for letter, tile in zip(guess, score_guess(guess, answer))
    )


def render_win(guess: str) -> str:
    """The board line for the winning guess, all on green."""
    letters = "  ".join(guess)
    return f"\033[30;{Tile.CORRECT.value}m {letters} {_RESET}"


def split_message(data: bytes | str) -> list[str]:
    """Split a wire message on runs of '<', ignoring anything after a NUL."""
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    text = text.split("\0", 1)[0]
    return [token for token in _DELIMITERS.split(text) if token]


@dataclass(frozen=True)
class Reply:
    """A server answer: an optional kind tag followed by a body."""

    kind: str | None
    body: str = ""

    def encode(self) -> bytes:
        if self.kind is None:
            text = self.body
        elif not self.body:
            text = self.kind
        else:
            text = f"{self.kind}<<{self.body}"
        return text.encode("utf-8")


class GameService:
    """Handles signup, login, play, guess and stats against the record store."""

    def __init__(self, store: RecordStore, daily: DailyWord) -> None:
        self.store = store
        self.daily = daily

    def signup(self, username: str, password: str) -> Reply:
        if self.store.register(username, password):
            return Reply(None, SIGNUP_OK)
        return Reply(None, SIGNUP_EXISTS)

    def login(self, username: str, password: str) -> Reply:
        result = self.store.login(username, password)
        if result is LoginResult.ACCEPTED:
            return Reply("accept")
        return Reply(None, _LOGIN_FAILURES[result])

    def play(self, username: str) -> Reply:
        """Start or resume today's game, or refuse if it is already over."""
        word = self.daily.current()
        status = self.store.get_status(username, word)
        history = self.store.read_history(username, word)
        if status >= GameStatus.END_GAME:
            reason = (
                "You have no more attempts for today, "
                if status == GameStatus.LOSE
                else "Word already found, "
            )
            return Reply(
                "ko", f"\n{history or ''}\n{reason}wait tomorrow for the next word!"
            )
        if status == GameStatus.NEW_WORD:
            stats = self.store.get_stats(username)
            stats.total_game += 1
            self.store.save_stats(username, stats)
        attempts = MAX_ATTEMPTS - self.store.get_status(username, word)
        if history:
            return Reply("ok", f"Attempts left: {attempts}\n\n{history}")
        return Reply("ok", f"Attempts left: {attempts}")

    def guess(self, username: str, guess: str) -> Reply:
        """Score one guess against the current word and update the records."""
        word = self.daily.word
        if guess not in self.daily_words:
            history = self.store.read_history(username, word) or ""
            return Reply("error", f"{INVALID_WORD}\n\n{history}")
        self.store.increase_attempt(username, word)
        if guess == word:
            stats = self.store.get_stats(username)
            stats.total_win += 1
            stats.current_win_streak += 1
            stats.win_streak = max(stats.win_streak, stats.current_win_streak)
            self.store.increase_attempt(username, word, GameStatus.WIN)
            self.store.save_stats(username, stats)
            self.store.append_history(username, word, render_win(guess))
            return Reply("win", self.store.read_history(username, word) or "")
        self.store.append_history(username, word, render_guess(guess, word))
        history = self.store.read_history(username, word) or ""
        attempts = MAX_ATTEMPTS - self.store.get_status(username, word)
        if attempts == 0:
            stats = self.store.get_stats(username)
            stats.win_streak = max(stats.win_streak, stats.current_win_streak)
            stats.current_win_streak = 0
            self.store.increase_attempt(username, word, GameStatus.LOSE)
            self.store.save_stats(username, stats)
            return Reply("end", history)
        return Reply("skip", f"Attempts left: {attempts}\n\n{history}")

    def stats(self, username: str) -> Reply:
        stats: Stats = self.store.get_stats(username)
        return Reply(
            None,
            f"total game: {stats.total_game}\n"
            f"total win: {stats.total_win}\n"
            f"max win streak: {stats.win_streak}\n"
            f"current win streak: {stats.current_win_streak}\n"
            f"win ratio: {stats.win_ratio():f}%",
        )

    @property
    def daily_words(self):
        return self.daily._words