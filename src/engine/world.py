"""
World Graph for GV Zork.

An arena of Location records addressed by integer handles. The graph
is the sole owner of every Location; exits are handle-to-handle edges
so nothing ever holds a reference that could outlive its storage.
"""

from __future__ import annotations

import logging
import random

from pydantic import BaseModel

from src.models import Item, Location, Npc

logger = logging.getLogger(__name__)

LocationId = int


class WorldBuildError(ValueError):
    """Raised when the world definition is malformed."""


class DuplicateExitError(WorldBuildError):
    """An exit with the same direction already exists at the location."""


class InvalidArgumentError(WorldBuildError):
    """A build call received an empty direction or an unknown handle."""


class EmptyWorldError(WorldBuildError):
    """A random location was requested from a world with no locations."""


class HiddenExit(BaseModel):
    """
    A conditional exit that lives outside the normal edge table.

    Only traversable from the portal while the player is flagged as
    being inside the intermediate room; the controller checks this.
    """

    portal: LocationId
    direction: str
    destination: LocationId


class WorldGraph:
    """Owns all locations and the edges between them."""

    def __init__(self) -> None:
        self._locations: list[Location] = []
        self._hidden_exits: list[HiddenExit] = []
        self.delivery: LocationId | None = None
        self.intermediate: LocationId | None = None

    def __len__(self) -> int:
        return len(self._locations)

    # Construction
    def add_location(self, name: str, description: str) -> LocationId:
        """Create a location and return its handle."""
        self._locations.append(Location(name=name, description=description))
        return len(self._locations) - 1

    def add_exit(self, source: LocationId, direction: str, destination: LocationId) -> None:
        """Wire a one-way edge. Directions are stored lower-cased."""
        key = direction.strip().lower()
        if not key:
            raise InvalidArgumentError("Exit direction must not be empty")
        self._check_handle(destination)
        location = self.get(source)
        if key in location.exits:
            raise DuplicateExitError(f"{location.name} already has an exit '{key}'")
        location.exits[key] = destination

    def add_hidden_exit(self, portal: LocationId, direction: str, destination: LocationId) -> None:
        key = direction.strip().lower()
        if not key:
            raise InvalidArgumentError("Exit direction must not be empty")
        self._check_handle(portal)
        self._check_handle(destination)
        for hidden in self._hidden_exits:
            if hidden.portal == portal and hidden.direction == key:
                raise DuplicateExitError(f"Hidden exit '{key}' already registered")
        self._hidden_exits.append(HiddenExit(portal=portal, direction=key, destination=destination))

    def designate_delivery(self, location: LocationId) -> None:
        self._check_handle(location)
        self.delivery = location

    def designate_intermediate(self, location: LocationId) -> None:
        self._check_handle(location)
        self.intermediate = location

    def add_npc(self, location: LocationId, npc: Npc) -> None:
        self.get(location).npcs.append(npc)

    # Items
    def add_item(self, location: LocationId, item: Item) -> None:
        self.get(location).items.append(item)

    def remove_item(self, location: LocationId, item_name: str) -> Item | None:
        """
        Remove the first item whose name matches, case-insensitively.

        Returns None without complaint when nothing matches; callers
        decide how to report that.
        """
        items = self.get(location).items
        for index, item in enumerate(items):
            if item.matches(item_name):
                return items.pop(index)
        return None

    def find_item(self, location: LocationId, item_name: str) -> Item | None:
        return self.get(location).find_item(item_name)

    def find_npc(self, location: LocationId, npc_name: str) -> Npc | None:
        return self.get(location).find_npc(npc_name)

    # Navigation
    def get(self, location: LocationId) -> Location:
        self._check_handle(location)
        return self._locations[location]

    def neighbor(self, location: LocationId, direction: str) -> LocationId | None:
        """Look up an exit. Unknown directions return None."""
        return self.get(location).exits.get(direction.strip().lower())

    def hidden_exit(self, location: LocationId, direction: str) -> HiddenExit | None:
        key = direction.strip().lower()
        for hidden in self._hidden_exits:
            if hidden.portal == location and hidden.direction == key:
                return hidden
        return None

    def mark_visited(self, location: LocationId) -> None:
        loc = self.get(location)
        if not loc.visited:
            logger.debug("Discovered %s", loc.name)
            loc.visited = True

    def find_by_name(self, name: str) -> LocationId | None:
        """Exact, case-insensitive name lookup. First match wins."""
        key = name.strip().lower()
        for handle, location in enumerate(self._locations):
            if location.name.lower() == key:
                return handle
        return None

    def visited_locations(self) -> list[LocationId]:
        return [handle for handle, loc in enumerate(self._locations) if loc.visited]

    def handles(self) -> range:
        return range(len(self._locations))

    def random_location(self, rng: random.Random) -> LocationId:
        """Pick any location uniformly, the current one included."""
        if not self._locations:
            raise EmptyWorldError("Cannot pick a location from an empty world")
        return rng.randrange(len(self._locations))

    def _check_handle(self, location: LocationId) -> None:
        if not 0 <= location < len(self._locations):
            raise InvalidArgumentError(f"Unknown location handle: {location}")
