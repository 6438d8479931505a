import pytest

from card_table.drag import begin_drag, drop, end_drag
from ashfall.config import Rules
from ashfall.models import Card_Definition, Resource_Amount, Resource_Type
from ashfall.registry import Card_Registry
from ashfall.setup import create_game

WOOD = Resource_Type.WOOD
GOLD = Resource_Type.GOLD


@pytest.fixture
def card_a():
    return Card_Definition(
        id="card_a",
        description="Costs wood",
        cost=(Resource_Amount(WOOD, 2),),
        production=(Resource_Amount(GOLD, 1),),
        build_time=1,
    )


@pytest.fixture
def card_b():
    return Card_Definition(
        id="card_b",
        description="Costs gold",
        cost=(Resource_Amount(GOLD, 1),),
        production=(Resource_Amount(WOOD, 3),),
        damage=2,
    )


@pytest.fixture
def registry(card_a, card_b):
    reg = Card_Registry()
    reg.register(card_a)
    reg.register(card_b)
    return reg


@pytest.fixture
def make_game(card_a, card_b):
    def _make(hand_size=0, pool=None, **kwargs):
        rules = Rules(seed=7, hand_size=hand_size, **kwargs)
        rules.starting_resources = {WOOD: 10, GOLD: 10}
        return create_game(rules, pool if pool is not None else [card_a, card_b])
    return _make


def drag_to(table, entity, target):
    """Full gesture: pick up, move over the target, drop, release."""
    begin_drag(table, entity, entity.x + 5, entity.y + 5)
    drop(entity, target)
    end_drag(table, entity)
