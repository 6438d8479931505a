from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Resource_Type(Enum):
    WOOD = "wood"
    STONE = "stone"
    GOLD = "gold"
    FOOD = "food"


@dataclass(frozen=True)
class Resource_Amount:
    resource_type: Resource_Type
    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"Resource amount must be >= 0, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value} {self.resource_type.value}"


@dataclass(frozen=True)
class Card_Definition:
    id: str
    image: Optional[str] = None
    description: str = ""
    cost: tuple[Resource_Amount, ...] = ()
    production: tuple[Resource_Amount, ...] = ()
    build_time: int = 0
    damage: int = 0

    def __post_init__(self):
        if self.build_time < 0:
            raise ValueError(f"{self.id}: build_time must be >= 0")
        if self.damage < 0:
            raise ValueError(f"{self.id}: damage must be >= 0")

    @property
    def title(self) -> str:
        return self.id.replace("_", " ").title()


def empty_resources() -> dict[Resource_Type, int]:
    return {r: 0 for r in Resource_Type}


@dataclass
class Game_State:
    """Everything the authority owns. Presentation code only reads it."""
    resources: dict[Resource_Type, int] = field(default_factory=empty_resources)
    doom_meter: int = 0
    turn: int = 0
    cards_in_hand: set = field(default_factory=set)
    cards_in_play: set = field(default_factory=set)
    build_progress: dict = field(default_factory=dict)  # entity -> turns until it produces

    def is_live(self, entity) -> bool:
        return entity in self.cards_in_hand or entity in self.cards_in_play
