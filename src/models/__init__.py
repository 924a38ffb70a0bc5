"""
Core Data Models for GV Zork.

These models define the world's entities: the items the player
carries around, the NPCs they talk to, and the locations they visit.
"""

from src.models.entity import (
    MAX_POINTS,
    MAX_WEIGHT,
    NO_MESSAGES,
    Item,
    Location,
    Npc,
)

__all__ = [
    "Item",
    "Npc",
    "Location",
    "NO_MESSAGES",
    "MAX_POINTS",
    "MAX_WEIGHT",
]
