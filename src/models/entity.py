"""
Entity Models for GV Zork.

Defines the core data structures of the game world:
Items, NPCs, and Locations.

Items are immutable values that move between containers. NPCs only
mutate their dialogue cursor. Locations are owned by the WorldGraph
and refer to their neighbours by handle, never by reference.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

NO_MESSAGES = "They have nothing to say."
"""Returned by Npc.next_message() when the NPC has no dialogue."""

MAX_POINTS = 1000
MAX_WEIGHT = 500.0


class Item(BaseModel):
    """
    A carryable object.

    Points are the award points the item is worth at the delivery
    location; 0 means the item cannot be delivered.
    """

    model_config = {"frozen": True}

    name: str = Field(min_length=1, description="Display and lookup name")
    description: str = Field(min_length=1)
    points: int = Field(ge=0, le=MAX_POINTS, description="Award points, 0 = not deliverable")
    weight: float = Field(ge=0, le=MAX_WEIGHT, description="Weight in pounds")

    def matches(self, key: str) -> bool:
        """Case-insensitive name comparison."""
        return self.name.lower() == key.lower()

    def label(self) -> str:
        """One-line summary used by look and inventory listings."""
        return f"{self.name} ({self.points} points, {self.weight:g} lbs) - {self.description}"


class Npc(BaseModel):
    """A non-player character with rotating dialogue."""

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    messages: list[str] = Field(default_factory=list)
    cursor: int = Field(default=0, ge=0, description="Index of the next line to say")

    def add_message(self, message: str) -> None:
        self.messages.append(message)

    def next_message(self) -> str:
        """Return the line at the cursor and advance it, wrapping around."""
        if not self.messages:
            return NO_MESSAGES
        index = self.cursor % len(self.messages)
        self.cursor = (index + 1) % len(self.messages)
        return self.messages[index]

    def matches(self, key: str) -> bool:
        return self.name.lower() == key.lower()


class Location(BaseModel):
    """
    A node in the world graph.

    Exits map a lower-cased direction token to the LocationId of the
    neighbour. Only the WorldGraph should mutate a Location.
    """

    name: str = Field(min_length=1, description="Unique display and teleport key")
    description: str = Field(min_length=1)
    items: list[Item] = Field(default_factory=list)
    npcs: list[Npc] = Field(default_factory=list)
    visited: bool = False
    exits: dict[str, int] = Field(default_factory=dict)

    def find_item(self, key: str) -> Item | None:
        for item in self.items:
            if item.matches(key):
                return item
        return None

    def find_npc(self, key: str) -> Npc | None:
        for npc in self.npcs:
            if npc.matches(key):
                return npc
        return None
