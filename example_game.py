"""
Example script playing a short scripted match.

This shows how to:
1. Start a match
2. Submit commands for the active combatant
3. Read the event stream and the match log
"""

from arena import Command, Direction, MatchController, Side
from infra.logger import configure_logging


SCRIPT = [
    Command.shoot(Side.UP, Direction.DOWN),      # breaks the block at (2, 5)
    Command.shoot(Side.LEFT, Direction.RIGHT),   # breaks the block at (5, 1)
    Command.shoot(Side.DOWN, Direction.UP),      # breaks the block at (8, 5)
    Command.shield(Side.RIGHT, Direction.LEFT),
    Command.shoot(Side.UP, Direction.UP),        # rejected: shield is up
    Command.shoot(Side.UP, Direction.DOWN),      # open lane to Player C
    Command.move(Side.LEFT, Direction.RIGHT),
]


def main():
    """Run the scripted match and print what happened."""
    configure_logging("INFO", logfile=None)

    print("Laser Arena - Scripted Match")
    print("=" * 60)

    controller = MatchController()
    controller.subscribe(lambda event: print(f"  {event}"))
    controller.start()

    for command in SCRIPT:
        print(f"\n> {command}")
        controller.submit(command)

    print("\nCombatants:")
    for combatant in controller.state.roster:
        print(f"  {combatant}")
    print(f"\nRound {controller.state.round}: {controller.state.status_line()}")


if __name__ == "__main__":
    main()
