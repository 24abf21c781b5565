"""
Entity definitions for the Laser Arena.

This module exports all entity types:
- Combatant (shielded laser knight)
"""

from .combatant import Combatant

__all__ = [
    "Combatant",
]
