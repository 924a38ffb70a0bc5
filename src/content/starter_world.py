"""
Starter World for GV Zork.

Builds the Grand Valley campus: locations, items, NPCs, and the
exits between them, including the Porta-Potty's hidden way down.
"""

from __future__ import annotations

from src.engine.world import WorldGraph
from src.models import Item, Npc

DELIVERY_LOCATION = "Ravines"
INTERMEDIATE_LOCATION = "Porta-Potty"
HIDDEN_DIRECTION = "hell"


def _npc(name: str, description: str, *messages: str) -> Npc:
    return Npc(name=name, description=description, messages=list(messages))


def create_starter_world() -> WorldGraph:
    """
    Create the reference campus.

    Returns a world with:
    - Nine locations, the Ravines being where the elf takes deliveries
    - A Porta-Potty whose hidden "hell" exit leads to Hell
    - Food worth well over the points needed, plus some useless junk
    """
    world = WorldGraph()

    kirkhof = world.add_location(
        "Kirkhof Center",
        "The student union hums with the sound of microwaves and group projects.",
    )
    clock_tower = world.add_location(
        "Clock Tower",
        "The Cook Carillon towers over the lawn, chiming at slightly the wrong time.",
    )
    library = world.add_location(
        "Zumberge Library",
        "Floor-to-ceiling windows and an uncomfortable number of whispering students.",
    )
    ravines = world.add_location(
        DELIVERY_LOCATION,
        "A wooded gully behind campus. Something small and hungry rustles in the leaves.",
    )
    mackinac = world.add_location(
        "Mackinac Hall",
        "A maze of hallways where room numbers follow no known logic.",
    )
    parking = world.add_location(
        "Parking Lot",
        "Rows of cars stretch to the horizon. A lonely Porta-Potty stands near the fence.",
    )
    potty = world.add_location(
        INTERMEDIATE_LOCATION,
        "It is dark, it is cramped, and it smells like regret. "
        "The floor feels strangely warm.",
    )
    hell = world.add_location(
        "Hell",
        "Fire, brimstone, and an endless loop of elevator music.",
    )
    fieldhouse = world.add_location(
        "Fieldhouse",
        "Squeaking sneakers and the faint smell of chlorine from the pool.",
    )

    world.add_exit(kirkhof, "north", clock_tower)
    world.add_exit(kirkhof, "east", mackinac)
    world.add_exit(clock_tower, "south", kirkhof)
    world.add_exit(clock_tower, "north", library)
    world.add_exit(library, "south", clock_tower)
    world.add_exit(library, "west", ravines)
    world.add_exit(ravines, "east", library)
    world.add_exit(mackinac, "west", kirkhof)
    world.add_exit(mackinac, "north", parking)
    world.add_exit(parking, "south", mackinac)
    world.add_exit(parking, "east", fieldhouse)
    world.add_exit(parking, "enter", potty)
    world.add_exit(potty, "out", parking)
    world.add_exit(hell, "up", parking)
    world.add_exit(fieldhouse, "west", parking)

    world.add_hidden_exit(potty, HIDDEN_DIRECTION, hell)
    world.designate_delivery(ravines)
    world.designate_intermediate(potty)

    world.add_item(kirkhof, Item(name="sandwich", description="A turkey club on sourdough.",
                                 points=300, weight=0.5))
    world.add_item(kirkhof, Item(name="coffee", description="Lukewarm, but caffeinated.",
                                 points=20, weight=1.0))
    world.add_item(clock_tower, Item(name="pigeon feather", description="Slightly grimy.",
                                     points=0, weight=0.01))
    world.add_item(library, Item(name="bagel", description="Smuggled past the no-food sign.",
                                 points=150, weight=0.3))
    world.add_item(library, Item(name="encyclopedia", description="Volume Q, for some reason.",
                                 points=0, weight=12.0))
    world.add_item(ravines, Item(name="acorn", description="A perfectly ordinary acorn.",
                                 points=5, weight=0.05))
    world.add_item(mackinac, Item(name="chalk", description="A stubby piece of white chalk.",
                                  points=0, weight=0.1))
    world.add_item(parking, Item(name="burrito", description="Found on a car hood. Still warm?",
                                 points=250, weight=1.0))
    world.add_item(parking, Item(name="traffic cone", description="Orange and judgemental.",
                                 points=0, weight=8.0))
    world.add_item(potty, Item(name="toilet paper", description="One sad square left.",
                               points=0, weight=0.2))
    world.add_item(hell, Item(name="ghost pepper", description="It glows a little.",
                              points=200, weight=0.1))
    world.add_item(hell, Item(name="pitchfork", description="Standard issue, slightly bent.",
                              points=0, weight=25.0))
    world.add_item(fieldhouse, Item(name="protein bar", description="Chocolate peanut butter.",
                                    points=180, weight=0.2))
    world.add_item(fieldhouse, Item(name="dumbbell", description="Forty pounds of iron.",
                                    points=0, weight=40.0))

    world.add_npc(kirkhof, _npc(
        "Barista",
        "A tired student in a green apron.",
        "We're out of oat milk.",
        "The elf in the Ravines? It comes by for pastries sometimes.",
        "Tips are appreciated.",
    ))
    world.add_npc(clock_tower, _npc(
        "Louie",
        "Louie the Laker, in full costume, in the heat.",
        "Go Lakers!",
        "I've heard the Porta-Potty in the Parking Lot goes somewhere... lower.",
    ))
    world.add_npc(library, _npc(
        "Librarian",
        "Peers at you over half-moon glasses.",
        "Shhh!",
        "Elves need about 500 points of food to be happy. Don't ask how I know.",
    ))
    world.add_npc(ravines, _npc(
        "Hungry Elf",
        "Knee-high, pointy-eared, and clutching an empty lunchbox.",
        "Food! Bring me food!",
        "Not just any food. Good food. Don't waste my time with junk.",
        "If you bring me garbage I'll send you somewhere random.",
    ))
    world.add_npc(mackinac, _npc(
        "Professor",
        "Has been grading the same stack of papers since 1997.",
        "Office hours are Tuesdays from 3:00 to 3:05.",
        "Did you do the reading?",
    ))
    world.add_npc(hell, _npc(
        "Devil",
        "Surprisingly polite, wearing a GVSU lanyard.",
        "Welcome! Parking permits are sold down here, you know.",
        "Take the pepper. It's the only thing here worth eating.",
    ))
    world.add_npc(fieldhouse, _npc(
        "Coach",
        "Whistle around the neck, clipboard in hand.",
        "Hustle!",
    ))

    return world
