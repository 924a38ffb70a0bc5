"""
Player State for GV Zork.

Inventory, carried weight, position, and the win ledger.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from src.engine.commands import lookup_key, strip_fillers
from src.engine.models import Outcome
from src.engine.world import LocationId, WorldGraph
from src.models import Item

logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    """Outcome of a single inventory action."""

    outcome: Outcome
    message: str
    item: Item | None = None


@dataclass
class WinLedger:
    """Tracks how many award points are still needed to win."""

    points_needed: int
    delivered: list[Item] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.points_needed == 0

    def deliver(self, item: Item) -> ActionResult:
        """
        Hand an item over at the delivery location.

        Zero-point items are refused; the caller decides what happens
        to the refused item and to the player.
        """
        if item.points == 0:
            logger.debug("Refused zero-point delivery of %s", item.name)
            return ActionResult(
                Outcome.REJECTED,
                f"The elf sniffs the {item.name} and scowls. \"That's useless to me!\"",
                item,
            )

        self.points_needed = max(0, self.points_needed - item.points)
        self.delivered.append(item)
        logger.debug("Delivered %s, %d points still needed", item.name, self.points_needed)
        return ActionResult(
            Outcome.DELIVERED,
            f"The elf gobbles up the {item.name}. "
            f"Points still needed: {self.points_needed}.",
            item,
        )


@dataclass
class PlayerState:
    """
    Everything about the player.

    current_weight is kept in step with the inventory on every change
    and never recomputed.
    """

    location: LocationId
    max_weight: float = 30.0
    inventory: list[Item] = field(default_factory=list)
    current_weight: float = 0.0
    in_intermediate_room: bool = False
    """Set only by go into the intermediate room; any other move clears it."""

    def take(self, world: WorldGraph, tokens: list[str]) -> ActionResult:
        """Pick up an item at the current location."""
        key = lookup_key(strip_fillers(tokens))
        if not key:
            return ActionResult(Outcome.MISSING_ARGUMENT, "Take what?")

        item = world.find_item(self.location, key)
        if item is None:
            return ActionResult(Outcome.ITEM_NOT_FOUND, f"There is no {key} here.")

        if not self.fits(item):
            return ActionResult(
                Outcome.TOO_HEAVY,
                f"The {item.name} is too heavy. You are carrying "
                f"{self.current_weight:g} of {self.max_weight:g} lbs.",
                item,
            )

        world.remove_item(self.location, item.name)
        self._add(item)
        return ActionResult(Outcome.TAKEN, f"You take the {item.name}.", item)

    def give(self, world: WorldGraph, tokens: list[str], ledger: WinLedger) -> ActionResult:
        """
        Give up an item.

        At the delivery location the item goes through the ledger;
        anywhere else it is dropped where the player stands.
        """
        key = lookup_key(strip_fillers(tokens))
        if not key:
            return ActionResult(Outcome.MISSING_ARGUMENT, "Give what?")

        item = self._remove(key)
        if item is None:
            return ActionResult(Outcome.ITEM_NOT_FOUND, f"You don't have a {key}.")

        if self.location == world.delivery:
            result = ledger.deliver(item)
            if result.outcome == Outcome.REJECTED:
                world.add_item(self.location, item)
            return result

        world.add_item(self.location, item)
        return ActionResult(Outcome.DROPPED, f"You set down the {item.name}.", item)

    def fits(self, item: Item) -> bool:
        """Whether the item can be carried, allowing for float drift at the limit."""
        total = self.current_weight + item.weight
        return total <= self.max_weight or math.isclose(total, self.max_weight, abs_tol=1e-9)

    def show_inventory(self) -> str:
        if not self.inventory:
            return "Your inventory is empty. Current weight: 0 lbs."

        lines = ["Inventory:", "-" * 40]
        for item in self.inventory:
            lines.append(f"  - {item.label()}")
        lines.append(f"Current weight: {self.current_weight:g} / {self.max_weight:g} lbs")
        return "\n".join(lines)

    def weight_is_consistent(self) -> bool:
        return math.isclose(
            self.current_weight, sum(i.weight for i in self.inventory), abs_tol=1e-9
        )

    def _add(self, item: Item) -> None:
        self.inventory.append(item)
        self.current_weight += item.weight

    def _remove(self, key: str) -> Item | None:
        for index, item in enumerate(self.inventory):
            if item.matches(key):
                self.inventory.pop(index)
                self.current_weight -= item.weight
                if not self.inventory:
                    # Keeps float error from surviving an empty bag
                    self.current_weight = 0.0
                return item
        return None
