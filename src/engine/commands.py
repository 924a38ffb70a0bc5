"""
Command Engine for GV Zork.

Turns a raw line of input into a ParsedCommand: whitespace
tokenizing, lower-casing, and alias resolution. Matching is plain
token comparison; there is no grammar.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.engine.models import CommandKind, ParsedCommand

FILLER_WORDS = frozenset({"the", "a", "to"})
"""
Dropped from argument lists before name lookups.

Stripped unconditionally, so a name that really contains one of these
words as a token ("Lord of the Rings") cannot be matched.
"""


@dataclass
class Command:
    """A command the player can type."""

    kind: CommandKind
    aliases: list[str] = field(default_factory=list)
    description: str = ""
    usage: str = ""


DEFAULT_COMMANDS = [
    Command(
        kind=CommandKind.GO,
        aliases=["run", "walk", "move"],
        description="Move in a direction",
        usage="go <direction>",
    ),
    Command(
        kind=CommandKind.LOOK,
        aliases=["view", "observe", "l"],
        description="Look around, or at someone here",
        usage="look [npc]",
    ),
    Command(
        kind=CommandKind.TAKE,
        aliases=["grab", "get"],
        description="Pick up an item",
        usage="take <item>",
    ),
    Command(
        kind=CommandKind.GIVE,
        aliases=["drop"],
        description="Give away or drop an item",
        usage="give <item>",
    ),
    Command(
        kind=CommandKind.TALK,
        aliases=["speak", "chat"],
        description="Talk to someone here",
        usage="talk <npc>",
    ),
    Command(
        kind=CommandKind.KISS,
        description="Kiss someone here",
        usage="kiss <npc>",
    ),
    Command(
        kind=CommandKind.INVENTORY,
        aliases=["inv", "i"],
        description="Show what you are carrying",
    ),
    Command(
        kind=CommandKind.TELEPORT,
        aliases=["tp"],
        description="Jump to a location you have already discovered",
        usage="teleport [location]",
    ),
    Command(
        kind=CommandKind.STATUS,
        aliases=["score"],
        description="Show how many points the elf still needs",
    ),
    Command(
        kind=CommandKind.HELP,
        aliases=["?", "h"],
        description="Show available commands",
    ),
    Command(
        kind=CommandKind.QUIT,
        aliases=["exit"],
        description="Leave the game",
    ),
]


def tokenize(line: str) -> list[str]:
    """Split on whitespace. No quoting or escaping."""
    return line.split()


def strip_fillers(tokens: list[str]) -> list[str]:
    return [t for t in tokens if t.lower() not in FILLER_WORDS]


def lookup_key(tokens: list[str]) -> str:
    """Join tokens into a lower-cased lookup key."""
    return " ".join(tokens).lower()


class CommandEngine:
    """
    Maps typed verbs to canonical commands.

    Holds two tables: canonical name -> Command, and alias -> canonical
    name. Handlers live with the controller, keyed by CommandKind.
    """

    def __init__(self, commands: list[Command] | None = None) -> None:
        self.commands: dict[str, Command] = {}
        self.aliases: dict[str, str] = {}
        for cmd in commands if commands is not None else DEFAULT_COMMANDS:
            self.register(cmd)

    def register(self, command: Command) -> None:
        name = command.kind.value
        if name in self.commands:
            raise ValueError(f"Command '{name}' is already registered")
        self.commands[name] = command
        for alias in command.aliases:
            alias = alias.lower()
            if alias in self.aliases or alias in self.commands:
                raise ValueError(f"Alias '{alias}' is already taken")
            self.aliases[alias] = name

    def resolve(self, verb: str) -> CommandKind | None:
        """Return the canonical command for a verb or alias, if any."""
        verb = verb.lower()
        name = self.aliases.get(verb, verb)
        command = self.commands.get(name)
        return command.kind if command else None

    def normalize(self, verb: str, args: list[str]) -> ParsedCommand:
        verb = verb.lower()
        return ParsedCommand(
            verb=verb,
            kind=self.resolve(verb),
            args=[arg.lower() for arg in args],
        )

    def parse(self, line: str) -> ParsedCommand | None:
        """Tokenize and normalize a line. Blank input gives None."""
        tokens = tokenize(line)
        if not tokens:
            return None
        return self.normalize(tokens[0], tokens[1:])

    def help_lines(self) -> list[str]:
        lines = ["Available Commands:", "-" * 40]
        for cmd in self.commands.values():
            aliases = f" ({', '.join(cmd.aliases)})" if cmd.aliases else ""
            usage = cmd.usage or cmd.kind.value
            lines.append(f"  {usage}{aliases} - {cmd.description}")
        return lines
