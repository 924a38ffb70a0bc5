"""
Game Controller for GV Zork.

Owns the world graph, the player state, and the command engine, and
runs one command per turn until the game is won or the player quits.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from src.engine.commands import CommandEngine, lookup_key, strip_fillers
from src.engine.models import (
    CommandKind,
    EngineConfig,
    GameStatus,
    Outcome,
    ParsedCommand,
    TurnResult,
)
from src.engine.player import PlayerState, WinLedger
from src.engine.world import LocationId, WorldGraph

logger = logging.getLogger(__name__)

WorldBuilder = Callable[[], WorldGraph]

UNKNOWN_COMMAND = "Unknown command! Type 'help' for a list of commands."

WIN_NARRATIVE = (
    "The elf pats its belly and lets out an enormous burp. \"That's it, I'm full!\"\n"
    "With a wave of its hand it conjures a golden bus pass and hands it to you.\n"
    "You have fed the elf and saved Grand Valley. You win!"
)


class GameController:
    """
    The turn loop.

    All world and player mutation happens through the handlers below,
    which are looked up by CommandKind in a single class-level table.
    """

    def __init__(
        self,
        world_builder: WorldBuilder | None = None,
        config: EngineConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if world_builder is None:
            from src.content import create_starter_world

            world_builder = create_starter_world

        self.config = config or EngineConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.commands = CommandEngine()
        self.world = world_builder()

        start = self.world.random_location(self.rng)
        self.world.mark_visited(start)
        self.player = PlayerState(location=start, max_weight=self.config.max_weight)
        self.ledger = WinLedger(points_needed=self.config.points_target)
        self.status = GameStatus.RUNNING
        logger.debug("New game starting at %s", self.world.get(start).name)

    @property
    def location(self) -> LocationId:
        return self.player.location

    @property
    def running(self) -> bool:
        return self.status == GameStatus.RUNNING

    def intro(self) -> str:
        """Opening text for a new game."""
        return (
            "Welcome to GV Zork!\n"
            "A hungry elf lurks somewhere on campus. "
            f"Feed it {self.ledger.points_needed} points worth of food to save Grand Valley.\n"
            "Type 'help' for a list of commands.\n\n" + self.describe_location()
        )

    def process_turn(self, line: str) -> TurnResult:
        """Run one line of player input through the game."""
        if not self.running:
            return TurnResult(
                outcome=Outcome.GAME_OVER, message="The game is over.", status=self.status
            )

        parsed = self.commands.parse(line)
        if parsed is None:
            return TurnResult(outcome=Outcome.NOTHING, status=self.status)

        result = self.execute(parsed)

        if self.status == GameStatus.RUNNING and self.ledger.is_complete:
            self.status = GameStatus.WON
            logger.info("Game won")
            message = f"{result.message}\n\n{WIN_NARRATIVE}" if result.message else WIN_NARRATIVE
            result = result.model_copy(update={"message": message})

        return result.model_copy(update={"status": self.status, "command": parsed.kind})

    def execute(self, parsed: ParsedCommand) -> TurnResult:
        logger.debug("Command %s %s", parsed.verb, parsed.args)
        if parsed.kind is None:
            return TurnResult(outcome=Outcome.UNKNOWN_COMMAND, message=UNKNOWN_COMMAND)
        handler = self._HANDLERS[parsed.kind]
        return handler(self, parsed.args)

    def describe_location(self, location: LocationId | None = None) -> str:
        """Name, description, items, people, and exits of a location."""
        loc = self.world.get(self.location if location is None else location)
        lines = [loc.name, "=" * len(loc.name), loc.description]

        if loc.items:
            lines.append("")
            lines.append("You see:")
            for item in loc.items:
                lines.append(f"  - {item.label()}")

        if loc.npcs:
            lines.append("")
            lines.append("People here:")
            for npc in loc.npcs:
                lines.append(f"  - {npc.name}")

        lines.append("")
        if loc.exits:
            lines.append("Exits:")
            for direction, handle in loc.exits.items():
                lines.append(f"  {direction} -> {self.world.get(handle).name}")
        else:
            lines.append("There are no obvious exits.")

        return "\n".join(lines)

    # =========================================================================
    # Command handlers
    # =========================================================================

    def _cmd_go(self, args: list[str]) -> TurnResult:
        direction = lookup_key(strip_fillers(args))
        if not direction:
            return TurnResult(outcome=Outcome.MISSING_ARGUMENT, message="Go where?")

        origin = self.location
        self.world.mark_visited(origin)

        hidden = self.world.hidden_exit(origin, direction)
        if hidden is not None and self.player.in_intermediate_room:
            destination = hidden.destination
        else:
            destination = self.world.neighbor(origin, direction)

        if destination is None:
            return TurnResult(outcome=Outcome.NO_EXIT, message="You can't go that way.")

        self._move_to(destination)
        self.player.in_intermediate_room = destination == self.world.intermediate
        return TurnResult(
            outcome=Outcome.MOVED,
            message=f"You go {direction}.\n\n{self.describe_location()}",
        )

    def _cmd_look(self, args: list[str]) -> TurnResult:
        target = lookup_key(strip_fillers(args))
        if not target:
            return TurnResult(outcome=Outcome.DESCRIBED, message=self.describe_location())

        npc = self.world.find_npc(self.location, target)
        if npc is not None:
            return TurnResult(outcome=Outcome.DESCRIBED, message=f"{npc.name}: {npc.description}")

        item = self.world.find_item(self.location, target)
        if item is None:
            item = next((i for i in self.player.inventory if i.matches(target)), None)
        if item is not None:
            return TurnResult(outcome=Outcome.DESCRIBED, message=item.label())

        return TurnResult(
            outcome=Outcome.TARGET_NOT_FOUND, message=f"You don't see {target} here."
        )

    def _cmd_take(self, args: list[str]) -> TurnResult:
        result = self.player.take(self.world, args)
        return TurnResult(outcome=result.outcome, message=result.message)

    def _cmd_give(self, args: list[str]) -> TurnResult:
        result = self.player.give(self.world, args, self.ledger)
        if result.outcome != Outcome.REJECTED:
            return TurnResult(outcome=result.outcome, message=result.message)

        origin = self.location
        self.world.mark_visited(origin)
        destination = self.world.random_location(self.rng)
        self._move_to(destination)
        logger.debug("Bad delivery relocated player to %s", self.world.get(destination).name)
        return TurnResult(
            outcome=Outcome.REJECTED,
            message=(
                f"{result.message}\n"
                "The elf snaps its fingers and the world spins around you...\n\n"
                f"{self.describe_location()}"
            ),
        )

    def _cmd_talk(self, args: list[str]) -> TurnResult:
        name = lookup_key(strip_fillers(args))
        if not name:
            return TurnResult(outcome=Outcome.MISSING_ARGUMENT, message="Talk to whom?")

        npc = self.world.find_npc(self.location, name)
        if npc is None:
            return TurnResult(outcome=Outcome.NPC_NOT_FOUND, message=f"There is no {name} here.")

        line = npc.next_message()
        return TurnResult(outcome=Outcome.TALKED, message=f'{npc.name} says: "{line}"')

    def _cmd_kiss(self, args: list[str]) -> TurnResult:
        name = lookup_key(strip_fillers(args))
        if not name:
            return TurnResult(outcome=Outcome.MISSING_ARGUMENT, message="Kiss whom?")

        npc = self.world.find_npc(self.location, name)
        if npc is None:
            return TurnResult(outcome=Outcome.NPC_NOT_FOUND, message=f"There is no {name} here.")

        return TurnResult(
            outcome=Outcome.KISSED,
            message=f"You kiss {npc.name}. They blush and look away awkwardly.",
        )

    def _cmd_inventory(self, args: list[str]) -> TurnResult:
        return TurnResult(outcome=Outcome.DESCRIBED, message=self.player.show_inventory())

    def _cmd_teleport(self, args: list[str]) -> TurnResult:
        name = lookup_key(strip_fillers(args))
        self.world.mark_visited(self.location)
        if not name:
            names = [self.world.get(h).name for h in self.world.visited_locations()]
            lines = ["Discovered locations:"] + [f"  - {n}" for n in names]
            lines.append("Usage: teleport <location>")
            return TurnResult(outcome=Outcome.MISSING_ARGUMENT, message="\n".join(lines))

        target = self.world.find_by_name(name)
        if target is None:
            return TurnResult(
                outcome=Outcome.UNKNOWN_LOCATION, message=f"There is no place called {name}."
            )

        if not self.world.get(target).visited:
            return TurnResult(
                outcome=Outcome.NOT_DISCOVERED,
                message=f"You haven't discovered {self.world.get(target).name} yet.",
            )

        self._move_to(target)
        return TurnResult(
            outcome=Outcome.TELEPORTED,
            message=f"*POOF* You teleport.\n\n{self.describe_location()}",
        )

    def _cmd_status(self, args: list[str]) -> TurnResult:
        lines = [
            f"Points still needed: {self.ledger.points_needed}",
            f"Items delivered: {len(self.ledger.delivered)}",
            f"Carrying: {self.player.current_weight:g} / {self.player.max_weight:g} lbs",
            f"Locations discovered: {len(self.world.visited_locations())} of {len(self.world)}",
        ]
        return TurnResult(outcome=Outcome.DESCRIBED, message="\n".join(lines))

    def _cmd_help(self, args: list[str]) -> TurnResult:
        return TurnResult(outcome=Outcome.DESCRIBED, message="\n".join(self.commands.help_lines()))

    def _cmd_quit(self, args: list[str]) -> TurnResult:
        self.status = GameStatus.QUIT
        logger.info("Player quit")
        return TurnResult(
            outcome=Outcome.QUIT, message="Farewell! The elf will have to fend for itself."
        )

    def _move_to(self, destination: LocationId) -> None:
        logger.debug(
            "Moving from %s to %s",
            self.world.get(self.location).name,
            self.world.get(destination).name,
        )
        self.player.location = destination
        self.player.in_intermediate_room = False

    _HANDLERS: dict[CommandKind, Callable[[GameController, list[str]], TurnResult]] = {
        CommandKind.GO: _cmd_go,
        CommandKind.LOOK: _cmd_look,
        CommandKind.TAKE: _cmd_take,
        CommandKind.GIVE: _cmd_give,
        CommandKind.TALK: _cmd_talk,
        CommandKind.KISS: _cmd_kiss,
        CommandKind.INVENTORY: _cmd_inventory,
        CommandKind.TELEPORT: _cmd_teleport,
        CommandKind.STATUS: _cmd_status,
        CommandKind.HELP: _cmd_help,
        CommandKind.QUIT: _cmd_quit,
    }
