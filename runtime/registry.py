from __future__ import annotations

import uuid
from typing import Callable, Dict, Iterator, Optional

from arena.controller import monotonic_ms

from .session import MatchSession


class SessionRegistry:
    """In-process table of independent match sessions keyed by id."""

    def __init__(self, clock: Callable[[], float] = monotonic_ms):
        self._clock = clock
        self._sessions: Dict[str, MatchSession] = {}

    def create(self, match_id: Optional[str] = None) -> MatchSession:
        """
        Create and register a new idle session.

        Raises:
            ValueError: If `match_id` is already in use
        """
        match_id = match_id or uuid.uuid4().hex
        if match_id in self._sessions:
            raise ValueError(f"Match id already in use: {match_id}")
        session = MatchSession(match_id, clock=self._clock)
        self._sessions[match_id] = session
        return session

    def get(self, match_id: str) -> MatchSession:
        """
        Raises:
            KeyError: If no session has that id
        """
        try:
            return self._sessions[match_id]
        except KeyError:
            raise KeyError(f"Unknown match: {match_id}") from None

    def discard(self, match_id: str) -> None:
        """
        Raises:
            KeyError: If no session has that id
        """
        session = self.get(match_id)
        del self._sessions[match_id]
        session.close()

    def __contains__(self, match_id: object) -> bool:
        return match_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sessions))
