from __future__ import annotations

from typing import Callable, List, Optional

from arena import MatchController
from arena.core.actions import Command
from arena.core.events import EffectRecord, Event
from arena.controller import monotonic_ms

from infra.logger import get_logger
from .frame import Frame

log = get_logger(__name__)


class MatchSession:
    """
    One running match plus the renderer-side bookkeeping a UI needs.

    The controller stays the single writer of match state. The session only
    listens to its events, keeps the effects that are still running and
    builds frames.
    """

    def __init__(self, match_id: str, clock: Callable[[], float] = monotonic_ms):
        self.match_id = match_id
        self._clock = clock
        self.controller = MatchController(clock=clock)
        self._effects: List[EffectRecord] = []
        self._last_events: List[Event] = []
        self.controller.subscribe(self._on_event)

        log.info("MatchSession %s created", match_id)

    # ------------------------------------------------------------------#
    # Core API
    # ------------------------------------------------------------------#
    def start(self) -> Frame:
        """Start the match and return the opening frame."""
        event = self.controller.start()
        self._last_events = [event]
        return self.frame()

    def submit(self, command: Command) -> Frame:
        """Submit a command for the active combatant and return the new frame."""
        outcome = self.controller.submit(command)
        self._last_events = list(outcome.events)
        return self.frame(accepted=outcome.accepted, consumed=outcome.consumed)

    def reset(self) -> Frame:
        """Throw the match away and start a fresh one."""
        self._effects = []
        event = self.controller.reset()
        self._last_events = [event]
        log.info("MatchSession %s reset", self.match_id)
        return self.frame()

    def frame(self, accepted: Optional[bool] = None, consumed: Optional[bool] = None) -> Frame:
        """Snapshot the match, dropping effects that have finished playing."""
        now = self._clock()
        self._effects = [effect for effect in self._effects if not effect.expired(now)]
        return Frame.capture(
            self.match_id,
            self.controller.state,
            events=self._last_events,
            effects=self._effects,
            time=now,
            accepted=accepted,
            consumed=consumed,
        )

    def close(self) -> None:
        log.info("MatchSession %s closed", self.match_id)

    # ------------------------------------------------------------------#
    # Internals
    # ------------------------------------------------------------------#
    def _on_event(self, event: Event) -> None:
        self._effects.extend(event.effects)

    @property
    def done(self) -> bool:
        return self.controller.is_finished
