"""Per-user record files: credentials, statistics, daily progress and game history."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path

MAX_ATTEMPTS = 6


class GameStatus(enum.IntEnum):
    """Progress of a user on the current word."""

    NEW_WORD = -1
    NO_ATTEMPTS = 0
    ONE_ATTEMPT = 1
    TWO_ATTEMPTS = 2
    THREE_ATTEMPTS = 3
    FOUR_ATTEMPTS = 4
    FIVE_ATTEMPTS = 5
    END_GAME = 6
    WIN = 7
    LOSE = 8
    ERROR = 9


class LoginResult(enum.IntEnum):
    """Outcome of a login attempt."""

    ACCEPTED = 1
    WRONG_PASSWORD = 0
    NO_SUCH_USER = -1
    INTERNAL_ERROR = -2


class RecordError(Exception):
    """A record file is missing, malformed or addressed by an invalid name."""


@dataclass
class Stats:
    """The statistics block at the top of a user record."""

    password: str
    total_game: int = 0
    total_win: int = 0
    win_streak: int = 0
    current_win_streak: int = 0

    def win_ratio(self) -> float:
        """Percentage of games won, 0 when no game was played."""
        if self.total_game == 0:
            return 0.0
        return self.total_win / self.total_game * 100


_HEADER_LINES = 6


def _check_name(name: str, what: str) -> str:
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise RecordError(f"invalid {what}: {name!r}")
    return name


class RecordStore:
    """Plain-text user records kept under one directory."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root)

    def user_path(self, username: str) -> Path:
        return self.root / f"{_check_name(username, 'username')}.txt"

    def history_path(self, username: str, word: str) -> Path:
        _check_name(username, "username")
        _check_name(word, "word")
        return self.root / "games" / f"{username}.{word}.txt"

    def register(self, username: str, password: str) -> bool:
        """Create a user; False if the user already exists."""
        path = self.user_path(username)
        if path.exists():
            return False
        self.root.mkdir(parents=True, exist_ok=True)
        path.write_text(f"{password}\n0\n0\n0\n0\n")
        return True

    def login(self, username: str, password: str) -> LoginResult:
        path = self.user_path(username)
        try:
            with path.open() as fh:
                first = fh.readline()
        except FileNotFoundError:
            return LoginResult.NO_SUCH_USER
        if not first:
            return LoginResult.INTERNAL_ERROR
        if first.rstrip("\n") == password:
            return LoginResult.ACCEPTED
        return LoginResult.WRONG_PASSWORD

    @staticmethod
    def _decode(marker: str) -> GameStatus:
        if marker == "w":
            return GameStatus.WIN
        if marker == "l":
            return GameStatus.LOSE
        if marker.isdigit():
            return GameStatus(int(marker))
        raise RecordError(f"unknown status marker {marker!r}")

    def get_status(self, username: str, word: str) -> GameStatus:
        """Status for ``word``; a first lookup records the word with no attempts."""
        path = self.user_path(username)
        try:
            lines = path.read_text().splitlines()
        except FileNotFoundError:
            return GameStatus.ERROR
        for line in lines:
            fields = line.split()
            if len(fields) >= 2 and fields[0] == word:
                return self._decode(fields[1][0])
        with path.open("a") as fh:
            fh.write(f"\n{word} 0\n")
        return GameStatus.NEW_WORD

    def increase_attempt(
        self, username: str, word: str, outcome: GameStatus | None = None
    ) -> int:
        """Count one more attempt, or mark the word won or lost.

        Returns the new attempt count when counting, otherwise 0.
        """
        if outcome not in (None, GameStatus.WIN, GameStatus.LOSE):
            raise ValueError(f"outcome must be WIN, LOSE or None, not {outcome!r}")
        path = self.user_path(username)
        try:
            lines = path.read_text().splitlines(keepends=True)
        except FileNotFoundError:
            return 0
        for index, line in enumerate(lines):
            fields = line.split()
            if not fields or fields[0] != word:
                continue
            if outcome is GameStatus.WIN:
                marker, result = "w", 0
            elif outcome is GameStatus.LOSE:
                marker, result = "l", 0
            else:
                if len(fields) < 2 or not fields[1][0].isdigit():
                    raise RecordError(f"cannot count attempts on {word!r}")
                result = int(fields[1][0]) + 1
                marker = str(result)
            ending = "\n" if line.endswith("\n") else ""
            lines[index] = f"{word} {marker}{ending}"
            path.write_text("".join(lines))
            return result
        return 0

    def get_stats(self, username: str) -> Stats:
        path = self.user_path(username)
        try:
            tokens = path.read_text().split()
        except FileNotFoundError as exc:
            raise RecordError(f"no record for user {username!r}") from exc
        if len(tokens) < 5:
            raise RecordError(f"truncated record for user {username!r}")
        try:
            numbers = [int(token) for token in tokens[1:5]]
        except ValueError as exc:
            raise RecordError(f"malformed record for user {username!r}") from exc
        return Stats(tokens[0], *numbers)

    def save_stats(self, username: str, stats: Stats) -> None:
        """Rewrite the statistics block, keeping the per-word lines below it."""
        path = self.user_path(username)
        try:
            rest = path.read_text().splitlines(keepends=True)[_HEADER_LINES:]
        except FileNotFoundError:
            return
        header = (
            f"{stats.password}\n{stats.total_game}\n{stats.total_win}\n"
            f"{stats.win_streak}\n{stats.current_win_streak}\n\n"
        )
        tmp = self.root / f"{username}_tmp.txt"
        tmp.write_text(header + "".join(rest))
        os.replace(tmp, path)

    def read_history(self, username: str, word: str) -> str | None:
        """The board of past guesses, one line each, or None if none exists."""
        path = self.history_path(username, word)
        try:
            lines = path.read_text().splitlines()
        except FileNotFoundError:
            return None
        return "".join(f"{line}\n" for line in lines)

    def append_history(self, username: str, word: str, line: str) -> None:
        path = self.history_path(username, word)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a") as fh:
            fh.write(f"{line}\n")