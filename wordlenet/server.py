"""Multiplexed TCP server speaking the '<<'-delimited game protocol."""

from __future__ import annotations

import os
import selectors
import socket
import sys
from collections.abc import Hashable
from pathlib import Path

from .game import GameService, Reply, split_message
from .records import RecordError, RecordStore
from .sessions import SessionRegistry
from .words import DailyWord, WordList

DEFAULT_PORT = 9034
_RECV_SIZE = 512
_BACKLOG = 10


class WordleServer:
    """Accepts connections and routes each request to the game service."""

    def __init__(
        self,
        service: GameService,
        host: str | None = None,
        port: int = DEFAULT_PORT,
    ) -> None:
        self.service = service
        self.sessions = SessionRegistry()
        self._listener = socket.create_server((host or "", port), backlog=_BACKLOG)
        self.address = self._listener.getsockname()

    def handle_message(self, conn_id: Hashable, data: bytes | str) -> bytes | None:
        """Answer one request; None when there is nothing to send back."""
        tokens = split_message(data)
        if not tokens:
            return None
        op, args = tokens[0], tokens[1:]
        try:
            reply = self._dispatch(conn_id, op, args)
        except RecordError as exc:
            reply = Reply("error", str(exc))
        return None if reply is None else reply.encode()

    def _dispatch(self, conn_id: Hashable, op: str, args: list[str]) -> Reply | None:
        if op in ("signup", "login"):
            if len(args) < 2:
                return Reply("error", "missing username or password")
            username, password = args[0], args[1]
            if op == "signup":
                return self.service.signup(username, password)
            reply = self.service.login(username, password)
            if reply.kind == "accept":
                self.sessions.add(username, conn_id)
            return reply
        if op not in ("play", "guess", "stats"):
            return None
        username = self.sessions.get(conn_id)
        if username is None:
            return Reply("error", "not logged in")
        if op == "play":
            return self.service.play(username)
        if op == "guess":
            return self.service.guess(username, args[0] if args else "")
        return self.service.stats(username)

    def disconnect(self, conn_id: Hashable) -> None:
        self.sessions.remove(conn_id)

    def serve_forever(self) -> None:
        with selectors.DefaultSelector() as selector:
            selector.register(self._listener, selectors.EVENT_READ, data=None)
            while True:
                for key, _ in selector.select():
                    if key.data is None:
                        self._accept(selector)
                    else:
                        self._service_connection(selector, key.fileobj, key.data)

    def _accept(self, selector: selectors.BaseSelector) -> None:
        try:
            conn, addr = self._listener.accept()
        except OSError as exc:
            print(f"accept: {exc}", file=sys.stderr)
            return
        conn_id = conn.fileno()
        selector.register(conn, selectors.EVENT_READ, data=conn_id)
        print(f"wordle: new connection from {addr[0]} on socket {conn_id}")

    def _service_connection(
        self, selector: selectors.BaseSelector, conn: socket.socket, conn_id: int
    ) -> None:
        try:
            data = conn.recv(_RECV_SIZE)
        except OSError as exc:
            print(f"recv: {exc}", file=sys.stderr)
            data = b""
        else:
            if not data:
                print(f"wordle: socket {conn_id} hung up")
        if not data:
            self.disconnect(conn_id)
            selector.unregister(conn)
            conn.close()
            return
        reply = self.handle_message(conn_id, data)
        if reply:
            try:
                conn.sendall(reply)
            except OSError as exc:
                print(f"send: {exc}", file=sys.stderr)


def serve(
    root: str | os.PathLike[str] = ".",
    host: str | None = None,
    port: int = DEFAULT_PORT,
) -> None:
    """Run the game server with words.txt and records/ under ``root``."""
    base = Path(root)
    words = WordList.from_file(base / "words.txt")
    daily = DailyWord(words)
    print(f"chosen word: {daily.word}")
    service = GameService(RecordStore(base / "records"), daily)
    WordleServer(service, host, port).serve_forever()