"""
Game content for GV Zork.

Pre-built worlds the game can be played in.
"""

from src.content.starter_world import (
    DELIVERY_LOCATION,
    HIDDEN_DIRECTION,
    INTERMEDIATE_LOCATION,
    create_starter_world,
)

__all__ = [
    "create_starter_world",
    "DELIVERY_LOCATION",
    "INTERMEDIATE_LOCATION",
    "HIDDEN_DIRECTION",
]
