"""
RayCaster - Laser shot resolution.

This module handles:
- Walking the line of fire cell by cell
- Resolving the first obstruction (edge, block or combatant)
- Shield absorption
- Damage and elimination
- Emitting events with their visual effects

Only the first obstruction along the ray is ever resolved. Lasers never
pierce blocks or combatants and never splash to neighbouring cells.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from ..core.events import EffectRecord, Event, EventKind
from ..core.types import BlockHit, Direction, GridPos, Side, INDESTRUCTIBLE, LASER_DAMAGE

if TYPE_CHECKING:
    from ..world.match_state import MatchState
    from ..entities.combatant import Combatant


_BLOCK_EVENTS = {
    BlockHit.BLOCKED: EventKind.BLOCK_INDESTRUCTIBLE_HIT,
    BlockHit.WEAKENED: EventKind.BLOCK_WEAKENED,
    BlockHit.DESTROYED: EventKind.BLOCK_DESTROYED,
}


@dataclass
class ShotResult:
    """
    Result of resolving a single shot.

    Attributes:
        shooter: Side that fired
        direction: Travel direction of the beam
        endpoint: Cell where the beam stopped
        outcome: Kind of the primary event (miss, block hit, shield, hit)
        target: Side struck, if the beam stopped on a combatant
        events: Events in emission order
    """
    shooter: Side
    direction: Direction
    endpoint: GridPos
    outcome: EventKind
    target: Optional[Side] = None
    events: List[Event] = field(default_factory=list)


class RayCaster:
    """
    Stateless resolver for laser shots.

    The caller has already checked that the shooter is not firing into its
    own shield. Every shot consumes the turn, whatever it hits.
    """

    def __init__(self, damage: int = LASER_DAMAGE):
        self.damage = damage

    def cast(
        self,
        state: MatchState,
        shooter: Combatant,
        direction: Direction,
        now: float = 0.0,
    ) -> ShotResult:
        """
        Fire from the shooter's cell toward `direction`.

        Args:
            state: Match state (board and roster are modified in-place)
            shooter: Combatant firing
            direction: Travel direction of the beam
            now: Clock reading in milliseconds for effect records

        Returns:
            ShotResult with the events produced
        """
        board = state.board
        d_row, d_col = direction.unit_vector
        origin = shooter.pos
        row, col = origin[0] + d_row, origin[1] + d_col
        last_cell = origin

        while board.in_bounds(row, col):
            if board.is_block(row, col):
                return self._hit_block(state, shooter, direction, (row, col), now)

            target = state.roster.combatant_at(row, col)
            if target is not None:
                return self._hit_combatant(shooter, target, direction, now)

            last_cell = (row, col)
            row += d_row
            col += d_col

        event = Event(
            kind=EventKind.BEAM_MISS,
            actor=shooter.side,
            message=f"{shooter.label()} shot {direction.key}, but hit nothing.",
            payload={"direction": direction.key, "end": list(last_cell)},
            effects=[EffectRecord.beam(origin, last_cell, now)],
        )
        return ShotResult(shooter.side, direction, last_cell, EventKind.BEAM_MISS, events=[event])

    def _hit_block(
        self,
        state: MatchState,
        shooter: Combatant,
        direction: Direction,
        cell: GridPos,
        now: float,
    ) -> ShotResult:
        row, col = cell
        hit = state.board.apply_damage(row, col)
        kind = _BLOCK_EVENTS[hit]

        if hit == BlockHit.BLOCKED:
            message = f"Laser hit an indestructible block at ({row}, {col})."
            remaining = INDESTRUCTIBLE
        elif hit == BlockHit.DESTROYED:
            message = f"Laser destroyed block at ({row}, {col})."
            remaining = 0
        else:
            remaining = state.board.tile_at(row, col).strength
            message = f"Laser weakened block at ({row}, {col}) to {remaining}."

        event = Event(
            kind=kind,
            actor=shooter.side,
            message=message,
            payload={
                "direction": direction.key,
                "row": row,
                "col": col,
                "strength": remaining,
            },
            effects=[
                EffectRecord.beam(shooter.pos, cell, now),
                EffectRecord.hit_flash(cell, now),
                EffectRecord.hit_shake(cell, now),
            ],
        )
        return ShotResult(shooter.side, direction, cell, kind, events=[event])

    def _hit_combatant(
        self,
        shooter: Combatant,
        target: Combatant,
        direction: Direction,
        now: float,
    ) -> ShotResult:
        cell = target.pos
        incoming_side = direction.opposite
        base_payload = {
            "direction": direction.key,
            "target": target.side.value,
            "row": cell[0],
            "col": cell[1],
        }
        beam = EffectRecord.beam(shooter.pos, cell, now)
        flash = EffectRecord.hit_flash(cell, now)

        if target.shield == incoming_side:
            event = Event(
                kind=EventKind.SHIELD_BLOCKED,
                actor=shooter.side,
                message=(f"{shooter.label()} shot {target.label()}, "
                         f"but shield blocked from {incoming_side.key}."),
                payload={**base_payload, "hp": target.hp},
                effects=[beam, flash],
            )
            return ShotResult(shooter.side, direction, cell, EventKind.SHIELD_BLOCKED,
                              target=target.side, events=[event])

        eliminated = target.take_damage(self.damage)
        events = [
            Event(
                kind=EventKind.HIT,
                actor=shooter.side,
                message=(f"{shooter.label()} hit {target.label()} "
                         f"for {self.damage} damage (HP {target.hp})."),
                payload={**base_payload, "damage": self.damage, "hp": target.hp},
                effects=[beam, flash, EffectRecord.hit_shake(cell, now)],
            )
        ]
        if eliminated:
            events.append(Event(
                kind=EventKind.ELIMINATED,
                actor=target.side,
                message=f"{target.label()} is eliminated.",
                payload={"by": shooter.side.value, "row": cell[0], "col": cell[1]},
            ))

        return ShotResult(shooter.side, direction, cell, EventKind.HIT,
                          target=target.side, events=events)
