"""Runtime layer: per-match sessions and UI frames on top of the arena engine."""

from .frame import Frame
from .session import MatchSession
from .registry import SessionRegistry

__all__ = [
    "Frame",
    "MatchSession",
    "SessionRegistry",
]
