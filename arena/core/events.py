"""
Event records emitted by the combat engine.

Every state change (and every rejected command) produces an Event. Renderers,
audio and logs consume these; they never feed back into the match.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .types import (
    GridPos,
    Side,
    LASER_BEAM_DURATION_MS,
    HIT_FLASH_DURATION_MS,
    HIT_SHAKE_DURATION_MS,
    HIT_SHAKE_AMPLITUDE,
)


class EventKind(Enum):
    """Kinds of events on the match event stream."""
    MATCH_STARTED = "match-started"
    COMMAND_REJECTED = "command-rejected"
    MOVED = "moved"
    MOVE_REJECTED = "move-rejected"
    SHIELD_REPOSITIONED = "shield-repositioned"
    SHOT_REJECTED = "shot-rejected"
    BEAM_MISS = "beam-miss"
    BLOCK_WEAKENED = "block-weakened"
    BLOCK_DESTROYED = "block-destroyed"
    BLOCK_INDESTRUCTIBLE_HIT = "block-indestructible-hit"
    SHIELD_BLOCKED = "shield-blocked"
    HIT = "hit"
    ELIMINATED = "eliminated"
    MATCH_WON = "match-won"
    TURN_ADVANCED = "turn-advanced"

    def __str__(self) -> str:
        return self.value


class EffectKind(Enum):
    """Transient visual effects a renderer may play."""
    BEAM = "beam"
    HIT_FLASH = "hit-flash"
    HIT_SHAKE = "hit-shake"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EffectRecord:
    """
    A bounded-lifetime visual effect.

    The engine only creates these; animating and pruning them is up to the
    renderer.

    Attributes:
        kind: Effect type
        row, col: Cell the effect is anchored to (beam origin for BEAM)
        start_time: Clock reading in milliseconds when the effect began
        duration: Lifetime in milliseconds
        end: Beam endpoint cell (BEAM only)
        amplitude: Shake amplitude in pixels (HIT_SHAKE only)
    """
    kind: EffectKind
    row: int
    col: int
    start_time: float
    duration: float
    end: Optional[GridPos] = None
    amplitude: Optional[float] = None

    def expired(self, now: float) -> bool:
        """Whether the effect has run its full duration at clock time `now`."""
        return now - self.start_time >= self.duration

    @staticmethod
    def beam(origin: GridPos, end: GridPos, now: float) -> EffectRecord:
        return EffectRecord(EffectKind.BEAM, origin[0], origin[1], now,
                            LASER_BEAM_DURATION_MS, end=end)

    @staticmethod
    def hit_flash(pos: GridPos, now: float) -> EffectRecord:
        return EffectRecord(EffectKind.HIT_FLASH, pos[0], pos[1], now,
                            HIT_FLASH_DURATION_MS)

    @staticmethod
    def hit_shake(pos: GridPos, now: float) -> EffectRecord:
        return EffectRecord(EffectKind.HIT_SHAKE, pos[0], pos[1], now,
                            HIT_SHAKE_DURATION_MS, amplitude=HIT_SHAKE_AMPLITUDE)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "kind": self.kind.value,
            "row": self.row,
            "col": self.col,
            "start_time": self.start_time,
            "duration": self.duration,
        }
        if self.end is not None:
            data["end"] = list(self.end)
        if self.amplitude is not None:
            data["amplitude"] = self.amplitude
        return data


@dataclass
class Event:
    """
    One entry on the event stream.

    Attributes:
        kind: What happened
        actor: Combatant the event is about (None for match-level events)
        message: Human-readable line for the match log
        payload: Kind-specific data (direction, target, coordinates, hp, ...)
        effects: Visual effects the renderer should play for this event
    """
    kind: EventKind
    actor: Optional[Side]
    message: str
    payload: Dict[str, Any] = field(default_factory=dict)
    effects: List[EffectRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to a plain dict."""
        return {
            "kind": self.kind.value,
            "actor": self.actor.value if self.actor else None,
            "message": self.message,
            "payload": dict(self.payload),
            "effects": [effect.to_dict() for effect in self.effects],
        }

    def __str__(self) -> str:
        return f"[{self.kind}] {self.message}"
