"""
Shared command and action validation helpers.

Both the controller and the resolvers, as well as any "what can I do?"
query from a UI, go through these functions so the rules live in one place.
Every check is read-only.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from .actions import Command
from .types import ActionValidation, ActionType, Direction, Phase

if TYPE_CHECKING:
    from ..world.match_state import MatchState
    from ..entities.combatant import Combatant


def validate_command(state: MatchState, command: Command) -> ActionValidation:
    """
    Gate a command before any resolution happens.

    Checks phase, turn ownership and that the actor is still alive.
    """
    actor_name = command.actor.display_name

    if state.phase != Phase.PLAYING:
        return ActionValidation.fail(
            "NOT_PLAYING",
            f"{actor_name} cannot act: match is {state.phase.value}."
        )

    active = state.active_combatant()
    if active.side != command.actor:
        return ActionValidation.fail(
            "NOT_ACTIVE",
            f"Not {actor_name}'s turn. Active is {active.label()}."
        )

    if not active.alive:
        return ActionValidation.fail(
            "ACTOR_DEAD",
            f"{actor_name} has been eliminated."
        )

    return ActionValidation.success()


def validate_move(state: MatchState, combatant: Combatant, direction: Direction) -> ActionValidation:
    """Check that stepping one cell toward `direction` lands on a free cell."""
    d_row, d_col = direction.unit_vector
    row, col = combatant.row + d_row, combatant.col + d_col

    if not state.board.in_bounds(row, col):
        return ActionValidation.fail(
            "OUT_OF_BOUNDS",
            f"{combatant.label()} cannot move out of map."
        )

    if state.board.is_block(row, col):
        return ActionValidation.fail(
            "BLOCKED",
            f"{combatant.label()} cannot move into a block."
        )

    if state.roster.combatant_at(row, col) is not None:
        return ActionValidation.fail(
            "OCCUPIED",
            f"{combatant.label()} cannot move into another player."
        )

    return ActionValidation.success()


def validate_shot(combatant: Combatant, direction: Direction) -> ActionValidation:
    """A combatant cannot fire through its own shield."""
    if direction == combatant.shield:
        return ActionValidation.fail(
            "SHIELD_IN_WAY",
            f"{combatant.label()} cannot shoot toward {direction.key} because their shield is there."
        )
    return ActionValidation.success()


def allowed_commands(state: MatchState, combatant: Combatant) -> List[Command]:
    """
    Every command the combatant could submit right now that would consume
    its turn. Empty when it is not the combatant's turn.
    """
    if not combatant.alive or state.phase != Phase.PLAYING:
        return []
    if state.active_combatant().side != combatant.side:
        return []

    commands: List[Command] = []
    for direction in Direction:
        if validate_move(state, combatant, direction).valid:
            commands.append(Command(combatant.side, ActionType.MOVE, direction))
        commands.append(Command(combatant.side, ActionType.SHIELD, direction))
        if validate_shot(combatant, direction).valid:
            commands.append(Command(combatant.side, ActionType.SHOOT, direction))
    return commands
