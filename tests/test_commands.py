"""Tests for command normalization."""

from __future__ import annotations

import pytest

from src.engine import (
    Command,
    CommandEngine,
    CommandKind,
    lookup_key,
    strip_fillers,
    tokenize,
)


@pytest.fixture
def engine() -> CommandEngine:
    return CommandEngine()


class TestTokenHelpers:
    """Tests for tokenizing and filler stripping."""

    def test_tokenize_splits_on_whitespace(self):
        assert tokenize("  take   the\tsandwich ") == ["take", "the", "sandwich"]

    def test_tokenize_has_no_quoting(self):
        assert tokenize('talk "hungry elf"') == ["talk", '"hungry', 'elf"']

    def test_strip_fillers_everywhere(self):
        assert strip_fillers(["the", "protein", "a", "bar"]) == ["protein", "bar"]
        assert strip_fillers(["to", "the", "Hungry", "Elf"]) == ["Hungry", "Elf"]

    def test_strip_fillers_is_unconditional(self):
        # Names containing a filler word lose it
        assert lookup_key(strip_fillers(["lord", "of", "the", "rings"])) == "lord of rings"

    def test_lookup_key_lowercases(self):
        assert lookup_key(["Traffic", "CONE"]) == "traffic cone"


class TestCommandEngine:
    """Tests for alias resolution and parsing."""

    @pytest.mark.parametrize(
        ("verb", "kind"),
        [
            ("go", CommandKind.GO),
            ("run", CommandKind.GO),
            ("walk", CommandKind.GO),
            ("take", CommandKind.TAKE),
            ("grab", CommandKind.TAKE),
            ("get", CommandKind.TAKE),
            ("give", CommandKind.GIVE),
            ("drop", CommandKind.GIVE),
            ("quit", CommandKind.QUIT),
            ("exit", CommandKind.QUIT),
            ("chat", CommandKind.TALK),
            ("inv", CommandKind.INVENTORY),
            ("tp", CommandKind.TELEPORT),
            ("kiss", CommandKind.KISS),
        ],
    )
    def test_resolve_aliases(self, engine: CommandEngine, verb, kind):
        assert engine.resolve(verb) == kind

    def test_resolve_is_case_insensitive(self, engine: CommandEngine):
        assert engine.resolve("GRAB") == CommandKind.TAKE
        assert engine.resolve("Go") == CommandKind.GO

    def test_unknown_verb(self, engine: CommandEngine):
        assert engine.resolve("dance") is None
        parsed = engine.parse("dance wildly")
        assert parsed is not None
        assert parsed.kind is None
        assert parsed.verb == "dance"

    def test_parse_lowercases_args(self, engine: CommandEngine):
        parsed = engine.parse("GET The Sandwich")
        assert parsed is not None
        assert parsed.kind == CommandKind.TAKE
        assert parsed.args == ["the", "sandwich"]

    def test_parse_blank_line(self, engine: CommandEngine):
        assert engine.parse("") is None
        assert engine.parse("   ") is None

    def test_duplicate_alias_rejected(self):
        with pytest.raises(ValueError):
            CommandEngine(
                [
                    Command(kind=CommandKind.GO, aliases=["x"]),
                    Command(kind=CommandKind.LOOK, aliases=["x"]),
                ]
            )

    def test_duplicate_command_rejected(self):
        with pytest.raises(ValueError):
            CommandEngine([Command(kind=CommandKind.GO), Command(kind=CommandKind.GO)])

    def test_help_lists_every_command(self, engine: CommandEngine):
        text = "\n".join(engine.help_lines())
        for kind in CommandKind:
            assert kind.value in text
