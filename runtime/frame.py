from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from arena.core.events import EffectRecord, Event
from arena.world import MatchState


@dataclass
class Frame:
    """
    UI-friendly snapshot of a match after a command.

    Attributes:
        match_id: Session id the frame belongs to
        state: Serialized match state (board, combatants, log, status)
        events: Events produced by the last command
        effects: Visual effects still running at `time`
        time: Clock reading (ms) the frame was taken at
        accepted: Whether the last command passed the turn gate
        consumed: Whether the last command spent the turn
    """
    match_id: str
    state: Dict[str, Any]
    events: List[Event] = field(default_factory=list)
    effects: List[EffectRecord] = field(default_factory=list)
    time: float = 0.0
    accepted: Optional[bool] = None
    consumed: Optional[bool] = None

    @classmethod
    def capture(
        cls,
        match_id: str,
        state: MatchState,
        *,
        events: List[Event],
        effects: List[EffectRecord],
        time: float,
        accepted: Optional[bool] = None,
        consumed: Optional[bool] = None,
    ) -> Frame:
        return cls(
            match_id=match_id,
            state=state.to_dict(),
            events=list(events),
            effects=list(effects),
            time=time,
            accepted=accepted,
            consumed=consumed,
        )

    @property
    def phase(self) -> str:
        return self.state["phase"]

    @property
    def status(self) -> str:
        return self.state["status"]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "match_id": self.match_id,
            "time": self.time,
            "accepted": self.accepted,
            "consumed": self.consumed,
            "events": [event.to_dict() for event in self.events],
            "effects": [effect.to_dict() for effect in self.effects],
            **self.state,
        }
