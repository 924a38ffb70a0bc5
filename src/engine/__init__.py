"""
Core Engine for GV Zork.

The engine orchestrates:
- The world graph (locations, exits, and who holds what)
- Player state (inventory, weight, and the win ledger)
- Command normalization (verbs, aliases, filler words)
- The game controller (one command per turn until won or quit)
"""

from __future__ import annotations

from src.engine.commands import (
    DEFAULT_COMMANDS,
    FILLER_WORDS,
    Command,
    CommandEngine,
    lookup_key,
    strip_fillers,
    tokenize,
)
from src.engine.game import UNKNOWN_COMMAND, WIN_NARRATIVE, GameController
from src.engine.models import (
    CommandKind,
    EngineConfig,
    GameStatus,
    Outcome,
    ParsedCommand,
    TurnResult,
)
from src.engine.player import ActionResult, PlayerState, WinLedger
from src.engine.world import (
    DuplicateExitError,
    EmptyWorldError,
    HiddenExit,
    InvalidArgumentError,
    LocationId,
    WorldBuildError,
    WorldGraph,
)

__all__ = [
    # Controller
    "GameController",
    "UNKNOWN_COMMAND",
    "WIN_NARRATIVE",
    # Models
    "CommandKind",
    "EngineConfig",
    "GameStatus",
    "Outcome",
    "ParsedCommand",
    "TurnResult",
    # Commands
    "Command",
    "CommandEngine",
    "DEFAULT_COMMANDS",
    "FILLER_WORDS",
    "lookup_key",
    "strip_fillers",
    "tokenize",
    # Player
    "ActionResult",
    "PlayerState",
    "WinLedger",
    # World
    "WorldGraph",
    "LocationId",
    "HiddenExit",
    "WorldBuildError",
    "DuplicateExitError",
    "InvalidArgumentError",
    "EmptyWorldError",
]
