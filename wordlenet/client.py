"""Interactive terminal client for the game server."""

from __future__ import annotations

import enum
import os
import socket
import subprocess
import sys
from typing import Any, TextIO

from .game import split_message
from .server import DEFAULT_PORT
from .words import WORD_LENGTH

WORDLE = (
    "                        _ _\n"
    "                       | | |\n"
    " __      _____  _ __ __| | | ___\n"
    " \\ \\ /\\ / / _ \\| '__/ _` | |/ _ \\\n"
    "  \\ V  V / (_) | | | (_| | |  __/\n"
    "   \\_/\\_/ \\___/|_|  \\__,_|_|\\___|\n"
)

MENU = "[p]lay    [s]tats    [q]uit\n\n"
PROMPT = "wordle> "
CONTINUE_BANNER = "<<<<<<<<<<<<<<<<<<press enter to continue<<<<<<<<<<<<<<<<<<\n"
WRONG_INPUT = "\nerror: wrong input, please insert one of the following:\n\n"

_RECV_SIZE = 4096
_MENU_WORDS = frozenset({"play", "leaderboard", "quit", "score"})
_MENU_LETTERS = frozenset("plsq")
_CLEAR_COMMAND = "cls" if os.name == "nt" else "clear"


class Operation(enum.IntEnum):
    """What the client asks the server to do first."""

    SIGNUP = 0
    LOGIN = 1


def clear_screen() -> int:
    """Clear the terminal with the platform's clear command; return its exit code."""
    return subprocess.run(_CLEAR_COMMAND, shell=True, check=False).returncode


def prompt(stdin: TextIO, stdout: TextIO) -> str | None:
    """Show the prompt and read one line; None at end of input."""
    stdout.write(PROMPT)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def enter_to_continue(stdin: TextIO, stdout: TextIO) -> bool:
    """Wait for the user to press enter; False if input has ended."""
    stdout.write(CONTINUE_BANNER)
    stdout.flush()
    return bool(stdin.readline())


def normalize_choice(text: str) -> str | None:
    """The menu letter a typed command stands for, or None if it is not one."""
    if len(text) > 1 and text not in _MENU_WORDS:
        return None
    if text and text[0] in _MENU_LETTERS:
        return text[0]
    return None


def _split_reply(reply: str) -> tuple[str, str]:
    tokens = split_message(reply)
    kind = tokens[0] if tokens else ""
    body = tokens[1] if len(tokens) > 1 else ""
    return kind, body


class WordleClient:
    """A logged-in session driven from a terminal."""

    def __init__(
        self,
        connection: Any,
        username: str,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.connection = connection
        self.username = username
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _clear(self) -> None:
        isatty = getattr(self.stdout, "isatty", None)
        if isatty is not None and isatty():
            self.stdout.flush()
            clear_screen()

    def request(self, message: str) -> str:
        """Send one message and return the server's answer."""
        self.connection.sendall(message.encode("utf-8"))
        data = self.connection.recv(_RECV_SIZE)
        if not data:
            raise ConnectionError("server closed the connection")
        return data.decode("utf-8", errors="replace").split("\0", 1)[0]

    def _next_word(self) -> str | None:
        line = prompt(self.stdin, self.stdout)
        while line is not None and not line.split():
            raw = self.stdin.readline()
            line = raw if raw else None
        return None if line is None else line.split()[0]

    def play_game(self) -> bool:
        """Guess until the game ends or the user exits; False if input ran out."""
        while True:
            self._write("Guess a 5 chars long word\nenter exit to exit\n")
            guess = self._next_word()
            if guess is None:
                return False
            if guess == "exit":
                return True
            if len(guess) != WORD_LENGTH:
                self._write("Error: word must be 5 characters long\n")
                continue
            self._clear()
            kind, body = _split_reply(self.request(f"guess<<{guess}"))
            if kind == "end":
                self._write(f"\n{body}\n")
                self._write("Oh no! You miss the correct word!\n\n")
                return True
            if kind == "win":
                self._write(f"\n\n{body}\n")
                self._write("\nCongratulations! You found the correct word!\n\n")
                return True
            self._write(f"\n{body}\n\n")

    def _show_menu(self, greeting: bool = False) -> None:
        self._write(f"{WORDLE}\n")
        if greeting:
            self._write(f"Welcome back {self.username}!\n")
        self._write(MENU)

    def _play(self) -> bool:
        kind, body = _split_reply(self.request("play"))
        self._clear()
        self._write(f"{body}\n\n")
        if kind == "ko":
            enter_to_continue(self.stdin, self.stdout)
            self._clear()
            self._show_menu()
            return True
        if not self.play_game():
            return False
        enter_to_continue(self.stdin, self.stdout)
        self._clear()
        self._write("\n")
        self._show_menu(greeting=True)
        return True

    def _stats(self) -> None:
        reply = self.request("stats")
        self._write(f"\n{reply}\n\n")
        enter_to_continue(self.stdin, self.stdout)
        self._clear()
        self._show_menu()

    def menu_loop(self) -> bool:
        """Run the main menu; True if the user quit, False if input ended."""
        self._show_menu(greeting=True)
        line = prompt(self.stdin, self.stdout)
        while line is not None:
            choice = normalize_choice(line)
            if choice == "q":
                self._write(f"See you soon {self.username}!\n")
                return True
            if choice == "l":
                raw = self.stdin.readline()
                line = raw.rstrip("\r\n") if raw else None
                continue
            if choice == "p":
                if not self._play():
                    return False
            elif choice == "s":
                self._stats()
            else:
                self._clear()
                self._write(f"{WORDLE}\n")
                self._write(WRONG_INPUT)
                self._write(MENU)
            line = prompt(self.stdin, self.stdout)
        return False


def connect(address: str, port: int = DEFAULT_PORT) -> socket.socket:
    """Open a TCP connection to the game server."""
    return socket.create_connection((address, port))


def run_client(username: str, password: str, address: str, op: int) -> int:
    """Sign up or log in and, once logged in, run the menu; returns an exit code."""
    operation = Operation(op)
    try:
        conn = connect(address)
    except socket.gaierror as exc:
        print(f"getaddrinfo: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"client: failed to connect: {exc}", file=sys.stderr)
        return 2
    with conn:
        client = WordleClient(conn, username, sys.stdin, sys.stdout)
        try:
            if operation is Operation.SIGNUP:
                print(client.request(f"signup<<{username}<<{password}"))
                return 0
            reply = client.request(f"login<<{username}<<{password}<<<<")
            tokens = split_message(reply)
            if not tokens or tokens[0] != "accept":
                print(reply)
                return 0
            client._clear()
            print("login succesfull!")
            client.menu_loop()
        except OSError as exc:
            print(f"recv: {exc}", file=sys.stderr)
            return 1
    return 0