"""Tests for the world graph."""

from __future__ import annotations

import random

import pytest

from src.engine import (
    DuplicateExitError,
    EmptyWorldError,
    InvalidArgumentError,
    WorldBuildError,
    WorldGraph,
)
from src.models import Item, Npc


@pytest.fixture
def world() -> WorldGraph:
    return WorldGraph()


def _item(name: str, points: int = 10, weight: float = 1.0) -> Item:
    return Item(name=name, description=f"A {name}.", points=points, weight=weight)


class TestExits:
    """Tests for wiring and resolving exits."""

    def test_add_and_resolve_exit(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        b = world.add_location("B", "Second.")
        world.add_exit(a, "north", b)
        assert world.neighbor(a, "north") == b

    def test_neighbor_is_case_insensitive(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        b = world.add_location("B", "Second.")
        world.add_exit(a, "North", b)
        assert world.neighbor(a, "NORTH") == b
        assert world.neighbor(a, "north") == b

    def test_unknown_direction_returns_none(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        assert world.neighbor(a, "sideways") is None

    def test_edges_are_one_way(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        b = world.add_location("B", "Second.")
        world.add_exit(a, "north", b)
        assert world.neighbor(b, "south") is None

    def test_duplicate_direction_rejected(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        b = world.add_location("B", "Second.")
        c = world.add_location("C", "Third.")
        world.add_exit(a, "north", b)
        with pytest.raises(DuplicateExitError):
            world.add_exit(a, "NORTH", c)
        assert world.neighbor(a, "north") == b

    @pytest.mark.parametrize("direction", ["", "   "])
    def test_empty_direction_rejected(self, world: WorldGraph, direction):
        a = world.add_location("A", "First.")
        with pytest.raises(InvalidArgumentError):
            world.add_exit(a, direction, a)

    def test_unknown_handle_rejected(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        with pytest.raises(InvalidArgumentError):
            world.add_exit(a, "north", 42)

    def test_build_errors_share_a_base(self):
        assert issubclass(DuplicateExitError, WorldBuildError)
        assert issubclass(InvalidArgumentError, WorldBuildError)
        assert issubclass(EmptyWorldError, ValueError)

    def test_hidden_exit_not_in_edge_table(self, world: WorldGraph):
        potty = world.add_location("Porta-Potty", "Cramped.")
        hell = world.add_location("Hell", "Hot.")
        world.add_hidden_exit(potty, "Hell", hell)
        assert world.neighbor(potty, "hell") is None
        hidden = world.hidden_exit(potty, "HELL")
        assert hidden is not None
        assert hidden.destination == hell
        assert world.hidden_exit(hell, "hell") is None

    def test_duplicate_hidden_exit_rejected(self, world: WorldGraph):
        potty = world.add_location("Porta-Potty", "Cramped.")
        hell = world.add_location("Hell", "Hot.")
        world.add_hidden_exit(potty, "hell", hell)
        with pytest.raises(DuplicateExitError):
            world.add_hidden_exit(potty, "hell", potty)


class TestItemsAndNpcs:
    """Tests for item and NPC placement."""

    def test_add_and_remove_item(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        world.add_item(a, _item("Bagel"))
        removed = world.remove_item(a, "bagel")
        assert removed is not None
        assert removed.name == "Bagel"
        assert world.get(a).items == []

    def test_remove_missing_item_is_noop(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        world.add_item(a, _item("bagel"))
        assert world.remove_item(a, "donut") is None
        assert [i.name for i in world.get(a).items] == ["bagel"]

    def test_items_keep_insertion_order(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        for name in ["c", "a", "b"]:
            world.add_item(a, _item(name))
        assert [i.name for i in world.get(a).items] == ["c", "a", "b"]

    def test_find_npc(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        world.add_npc(a, Npc(name="Hungry Elf", description="Small."))
        assert world.find_npc(a, "hungry elf") is not None
        assert world.find_npc(a, "elf") is None


class TestDiscovery:
    """Tests for visited flags, name lookup and random picks."""

    def test_mark_visited_is_monotonic(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        assert world.get(a).visited is False
        world.mark_visited(a)
        world.mark_visited(a)
        assert world.get(a).visited is True
        assert world.visited_locations() == [a]

    def test_find_by_name_exact_and_case_insensitive(self, world: WorldGraph):
        lib = world.add_location("Zumberge Library", "Quiet.")
        assert world.find_by_name("zumberge library") == lib
        assert world.find_by_name("ZUMBERGE LIBRARY") == lib
        assert world.find_by_name("zumberge") is None

    def test_random_location_is_any_location(self, world: WorldGraph):
        handles = [world.add_location(f"L{i}", "Somewhere.") for i in range(4)]
        rng = random.Random(7)
        picks = {world.random_location(rng) for _ in range(200)}
        assert picks == set(handles)

    def test_random_location_empty_world(self, world: WorldGraph):
        with pytest.raises(EmptyWorldError):
            world.random_location(random.Random(0))

    def test_designations(self, world: WorldGraph):
        a = world.add_location("A", "First.")
        b = world.add_location("B", "Second.")
        world.designate_delivery(a)
        world.designate_intermediate(b)
        assert world.delivery == a
        assert world.intermediate == b
        with pytest.raises(InvalidArgumentError):
            world.designate_delivery(99)
