"""
MatchController - Main match interface.

This is the primary API for the Laser Arena. It owns one MatchState and
runs the per-turn protocol:

    1. Gate the command (phase, active actor, actor alive)
    2. Resolve the action
    3. Not consumed -> stop; the same actor may retry
    4. Consumed -> check victory; on a win finish the match and stop
    5. Otherwise advance the turn

Usage:
    from arena import MatchController, Command, Side, Direction

    controller = MatchController()
    controller.start()
    outcome = controller.submit(Command.shoot(Side.UP, Direction.DOWN))
    for event in outcome.events:
        print(event.message)
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .core.actions import Command
from .core.events import Event, EventKind
from .core.types import Phase, TURN_ORDER
from .core.validation import validate_command
from .mechanics import ActionResolver, VictoryConditions
from .world import MatchState

from infra.logger import get_logger

log = get_logger(__name__)

EventListener = Callable[[Event], None]


def monotonic_ms() -> float:
    """Default effect clock in milliseconds."""
    return time.monotonic() * 1000.0


@dataclass
class TurnOutcome:
    """
    Result of submitting one command.

    Attributes:
        accepted: False if the command was gated out before resolution
        consumed: True if the actor's turn was spent
        events: Events emitted while handling the command, in order
    """
    accepted: bool
    consumed: bool
    events: List[Event] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accepted": self.accepted,
            "consumed": self.consumed,
            "events": [event.to_dict() for event in self.events],
        }


class MatchController:
    """
    Laser Arena match controller.

    The controller manages:
    - The match lifecycle (idle -> playing -> finished, reset)
    - Command gating and the per-turn protocol
    - Event fan-out to listeners and the match log

    Attributes:
        state: Current match state
    """

    def __init__(
        self,
        clock: Callable[[], float] = monotonic_ms,
        resolver: Optional[ActionResolver] = None,
        state: Optional[MatchState] = None,
    ):
        """
        Initialize a controller with an idle match.

        Args:
            state: Initial idle match (standard layout if omitted); reset()
                   always returns to the standard layout
            clock: Millisecond clock used to timestamp visual effects
            resolver: Action resolver (default: standard resolver)
        """
        self.state = state if state is not None else MatchState()
        self._clock = clock
        self._resolver = resolver or ActionResolver()
        self._victory = VictoryConditions()
        self._listeners: List[EventListener] = []

    # ------------------------------------------------------------------#
    # Event stream
    # ------------------------------------------------------------------#
    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        """
        Register a listener for every emitted event.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, events: List[Event]) -> None:
        for event in events:
            self.state.push_log(event.message)

        # Every event is logged before any listener runs
        for event in events:
            for listener in list(self._listeners):
                try:
                    listener(event)
                except Exception:
                    log.exception("Event listener %r failed on %s", listener, event.kind)

    # ------------------------------------------------------------------#
    # Lifecycle
    # ------------------------------------------------------------------#
    def start(self) -> Event:
        """
        Start the match from the idle phase.

        Raises:
            RuntimeError: If the match has already started
        """
        if self.state.phase != Phase.IDLE:
            raise RuntimeError(f"Cannot start a match that is {self.state.phase.value}")

        self.state.phase = Phase.PLAYING
        order = " -> ".join(side.value.title() for side in TURN_ORDER)
        event = Event(
            kind=EventKind.MATCH_STARTED,
            actor=None,
            message=f"Match started. Turn order: {order}.",
            payload={"round": self.state.round, "active": self.state.turns.active_side.value},
        )
        self._emit([event])
        log.info("Match started")
        return event

    def reset(self) -> Event:
        """Discard all board, roster and turn state and start a fresh match."""
        self.state = MatchState()
        log.info("Match reset")
        return self.start()

    # ------------------------------------------------------------------#
    # Turn protocol
    # ------------------------------------------------------------------#
    def submit(self, command: Command) -> TurnOutcome:
        """
        Run one command through the per-turn protocol.

        Args:
            command: Actor, action and direction

        Returns:
            TurnOutcome with the emitted events
        """
        state = self.state

        gate = validate_command(state, command)
        if not gate.valid:
            event = Event(
                kind=EventKind.COMMAND_REJECTED,
                actor=command.actor,
                message=gate.message,
                payload={"reason": gate.error_code, "command": command.to_dict()},
            )
            self._emit([event])
            log.debug("Rejected %s: %s", command, gate.error_code)
            return TurnOutcome(accepted=False, consumed=False, events=[event])

        actor = state.active_combatant()
        result = self._resolver.resolve(
            state, actor, command.action, command.direction, now=self._clock()
        )
        events = list(result.events)

        if not result.consumed:
            self._emit(events)
            log.debug("%s not consumed (%s)", command, result.failure_reason)
            return TurnOutcome(accepted=True, consumed=False, events=events)

        victory = self._victory.check_all(state)
        if victory.is_game_over:
            state.phase = Phase.FINISHED
            state.winner = victory.winner
            events.append(Event(
                kind=EventKind.MATCH_WON,
                actor=victory.winner.side,
                message=victory.reason,
                payload={"winner": victory.winner.side.value, "round": state.round},
            ))
            self._emit(events)
            log.info("Match finished in round %d: %s", state.round, victory.reason)
            return TurnOutcome(accepted=True, consumed=True, events=events)

        advance = state.turns.advance(state.roster)
        next_actor = state.active_combatant()
        events.append(Event(
            kind=EventKind.TURN_ADVANCED,
            actor=next_actor.side,
            message=f"Round {advance.round}: {next_actor.label()} to act.",
            payload={
                "previous": TURN_ORDER[advance.previous_index].value,
                "active": next_actor.side.value,
                "round": advance.round,
                "new_round": advance.wrapped,
            },
        ))
        self._emit(events)
        log.debug("Resolved %s; next %s (round %d)", command, next_actor.side, advance.round)
        return TurnOutcome(accepted=True, consumed=True, events=events)

    # ------------------------------------------------------------------#
    # Convenience
    # ------------------------------------------------------------------#
    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def is_finished(self) -> bool:
        return self.state.phase == Phase.FINISHED
