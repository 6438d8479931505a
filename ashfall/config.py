from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
from ashfall.models import Resource_Type
from ashfall.registry import DEFAULT_CARDS_PATH


def default_starting_resources() -> dict[Resource_Type, int]:
    return {
        Resource_Type.WOOD: 5,
        Resource_Type.STONE: 2,
        Resource_Type.GOLD: 1,
        Resource_Type.FOOD: 3,
    }


@dataclass
class Rules:
    seed: Optional[int] = None
    cards_path: str = DEFAULT_CARDS_PATH
    starting_resources: dict[Resource_Type, int] = field(default_factory=default_starting_resources)
    hand_size: int = 5     # cards drawn at setup
    slot_count: int = 5
    draw_per_turn: int = 1

    # Off by default: plays may drive resources negative.
    check_affordability: bool = False
    # Off by default: the deck is sampled with replacement and never runs out.
    depleting_deck: bool = False
