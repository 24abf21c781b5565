"""
ActionResolver - Single-action resolution.

This module handles:
- Validating move targets (bounds, blocks, other combatants)
- Applying moves and shield changes
- Guarding against shooting through one's own shield
- Delegating shots to the RayCaster
- Reporting whether the turn was consumed
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional
from dataclasses import dataclass, field

from .raycast import RayCaster, ShotResult
from ..core.events import Event, EventKind
from ..core.types import ActionType, Direction
from ..core.validation import validate_move, validate_shot

if TYPE_CHECKING:
    from ..world.match_state import MatchState
    from ..entities.combatant import Combatant


@dataclass
class ActionResult:
    """
    Outcome of resolving one action.

    Attributes:
        consumed: True if the actor's turn is spent
        events: Events produced, in order
        failure_reason: Machine-readable code when the action was rejected
        shot: Ray-cast details for SHOOT actions that fired
    """
    consumed: bool
    events: List[Event] = field(default_factory=list)
    failure_reason: Optional[str] = None
    shot: Optional[ShotResult] = None


class ActionResolver:
    """
    Stateless resolver for move, shield and shoot actions.

    The caller has already checked that the match is playing and that the
    combatant is the living active combatant. Rejected actions leave the
    state untouched and do not consume the turn, so the same actor may retry.
    """

    def __init__(self, ray_caster: Optional[RayCaster] = None):
        self._ray_caster = ray_caster or RayCaster()

    def resolve(
        self,
        state: MatchState,
        combatant: Combatant,
        action: ActionType,
        direction: Direction,
        now: float = 0.0,
    ) -> ActionResult:
        """
        Resolve a single action for the active combatant.

        Args:
            state: Match state (modified in-place)
            combatant: Active combatant
            action: MOVE, SHIELD or SHOOT; anything else is a no-op
            direction: Direction the action is applied toward
            now: Clock reading in milliseconds for effect records

        Returns:
            ActionResult
        """
        if action == ActionType.MOVE:
            return self._resolve_move(state, combatant, direction)
        if action == ActionType.SHIELD:
            return self._resolve_shield(combatant, direction)
        if action == ActionType.SHOOT:
            return self._resolve_shoot(state, combatant, direction, now)
        return ActionResult(consumed=False)

    def _resolve_move(self, state: MatchState, combatant: Combatant, direction: Direction) -> ActionResult:
        validation = validate_move(state, combatant, direction)
        if not validation.valid:
            event = Event(
                kind=EventKind.MOVE_REJECTED,
                actor=combatant.side,
                message=validation.message,
                payload={"direction": direction.key, "reason": validation.error_code},
            )
            return ActionResult(consumed=False, events=[event], failure_reason=validation.error_code)

        old_pos = combatant.pos
        d_row, d_col = direction.unit_vector
        combatant.row += d_row
        combatant.col += d_col
        combatant.aim = direction

        event = Event(
            kind=EventKind.MOVED,
            actor=combatant.side,
            message=f"{combatant.label()} moved {direction.key}.",
            payload={
                "direction": direction.key,
                "from": list(old_pos),
                "to": list(combatant.pos),
            },
        )
        return ActionResult(consumed=True, events=[event])

    def _resolve_shield(self, combatant: Combatant, direction: Direction) -> ActionResult:
        previous = combatant.shield
        combatant.shield = direction
        event = Event(
            kind=EventKind.SHIELD_REPOSITIONED,
            actor=combatant.side,
            message=f"{combatant.label()} moved shield to {direction.key}.",
            payload={"direction": direction.key, "previous": previous.key},
        )
        return ActionResult(consumed=True, events=[event])

    def _resolve_shoot(
        self,
        state: MatchState,
        combatant: Combatant,
        direction: Direction,
        now: float,
    ) -> ActionResult:
        validation = validate_shot(combatant, direction)
        if not validation.valid:
            event = Event(
                kind=EventKind.SHOT_REJECTED,
                actor=combatant.side,
                message=validation.message,
                payload={"direction": direction.key, "reason": validation.error_code},
            )
            return ActionResult(consumed=False, events=[event], failure_reason=validation.error_code)

        combatant.aim = direction
        shot = self._ray_caster.cast(state, combatant, direction, now)
        return ActionResult(consumed=True, events=list(shot.events), shot=shot)
