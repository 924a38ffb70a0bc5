"""
Engine Data Models for GV Zork.

Defines the data structures for the game loop:
- EngineConfig: Tunable rules of the game
- ParsedCommand: A normalized line of player input
- TurnResult: Response to the player
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class GameStatus(str, Enum):
    """Lifecycle of a game."""

    RUNNING = "running"
    WON = "won"
    QUIT = "quit"


class CommandKind(str, Enum):
    """Canonical command names."""

    GO = "go"
    LOOK = "look"
    TAKE = "take"
    GIVE = "give"
    TALK = "talk"
    KISS = "kiss"
    INVENTORY = "inventory"
    TELEPORT = "teleport"
    STATUS = "status"
    HELP = "help"
    QUIT = "quit"


class Outcome(str, Enum):
    """What a command did. Play-time failures are outcomes, not exceptions."""

    # Movement
    MOVED = "moved"
    NO_EXIT = "no_exit"
    TELEPORTED = "teleported"
    NOT_DISCOVERED = "not_discovered"
    UNKNOWN_LOCATION = "unknown_location"

    # Items
    TAKEN = "taken"
    TOO_HEAVY = "too_heavy"
    ITEM_NOT_FOUND = "item_not_found"
    DROPPED = "dropped"
    DELIVERED = "delivered"
    REJECTED = "rejected"

    # NPCs
    TALKED = "talked"
    KISSED = "kissed"
    NPC_NOT_FOUND = "npc_not_found"
    TARGET_NOT_FOUND = "target_not_found"

    # Meta
    DESCRIBED = "described"
    MISSING_ARGUMENT = "missing_argument"
    UNKNOWN_COMMAND = "unknown_command"
    NOTHING = "nothing"
    GAME_OVER = "game_over"
    QUIT = "quit"


class EngineConfig(BaseModel):
    """Engine configuration."""

    max_weight: float = Field(default=30.0, ge=0, description="Carrying capacity in pounds")
    points_target: int = Field(default=500, gt=0, description="Award points needed to win")
    seed: int | None = Field(default=None, description="Seed for the random source")


class ParsedCommand(BaseModel):
    """A tokenized, lower-cased, alias-resolved line of input."""

    verb: str = Field(description="The verb as typed, lower-cased")
    kind: CommandKind | None = Field(default=None, description="None if the verb is unknown")
    args: list[str] = Field(default_factory=list)


class TurnResult(BaseModel):
    """Result returned to the player."""

    outcome: Outcome
    message: str = Field(default="", description="Text shown to the player")
    status: GameStatus = GameStatus.RUNNING
    command: CommandKind | None = None

    def is_terminal(self) -> bool:
        return self.status != GameStatus.RUNNING
