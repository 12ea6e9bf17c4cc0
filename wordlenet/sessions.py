"""Which user is logged in on which connection."""

from __future__ import annotations

from collections.abc import Hashable


class SessionRegistry:
    """Maps connection identifiers to logged-in usernames."""

    def __init__(self) -> None:
        self._sessions: dict[Hashable, str] = {}

    def add(self, username: str, conn_id: Hashable) -> None:
        self._sessions[conn_id] = username

    def remove(self, conn_id: Hashable) -> None:
        """Forget a connection; unknown connections are ignored."""
        self._sessions.pop(conn_id, None)

    def get(self, conn_id: Hashable) -> str | None:
        return self._sessions.get(conn_id)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, conn_id: object) -> bool:
        return conn_id in self._sessions