"""Command line entry point: start the server, sign up or log in."""

from __future__ import annotations

import sys

from .client import Operation, run_client
from .server import serve

INFO = (
    "\nFind the word in 6 attempts! A new word will be choose each day\n"
    "\t - A yellow letter means the letter is inside the word but in a different position!\n"
    "\t - A green letter means it's in the right position!\n\n"
    "Signup and play!\nUsage:\n"
    "\t - signup <username>:<password> <url>:  create a new user to remote server\n"
    "\t - login <username>:<password> <url>:   login to remote server\n\n"
    "After logging in follow the instructions to play!\n\n"
)

_COMMANDS = {"signup": Operation.SIGNUP, "login": Operation.LOGIN}


def parse_credentials(text: str) -> tuple[str, str]:
    """Split ``username:password``; the password may itself contain colons."""
    head, _, tail = text.lstrip(":").partition(":")
    if not head or not tail:
        raise ValueError(f"expected <username>:<password>, got {text!r}")
    return head, tail


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(INFO, end="")
        return 0
    command = args[0]
    if command == "serve":
        serve()
        return 0
    if command not in _COMMANDS:
        print(
            f"unrecognized command {command}\nusage:\n"
            "\tsignup:\twordle signup <username>:<password> <url>\n"
            "\tlogin:\twordle login <username>:<password> <url>"
        )
        return 1
    if len(args) != 3:
        print(f"error\nusage:\n\twordle {command} <username>:<password> <url>")
        return 1
    try:
        credentials = parse_credentials(args[1])
    except ValueError:
        print(f"error\nusage:\n\twordle {command} <username>:<password> <url>")
        return 1
    return run_client(*credentials, args[2], _COMMANDS[command])


if __name__ == "__main__":
    sys.exit(main())