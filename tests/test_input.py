import pytest

from conftest import WOOD
from card_table.models import Drag_Phase
from card_table.table import update_positions

# The handlers only need pyray importable, not a window.
pytest.importorskip("pyray")
from card_table.input import handle_mouse_move, handle_mouse_press, handle_mouse_release  # noqa: E402


@pytest.fixture
def game(make_game, card_a):
    game = make_game(hand_size=2, pool=[card_a], slot_count=2)
    game.hand.x, game.hand.y, game.hand.spread_x = 0, 600, 160
    first, second = game.slots
    first.x, first.y = 400, 100
    second.x, second.y = 700, 100
    for container in game.table.containers:
        update_positions(container, game.table)
    return game


def test_press_picks_topmost_hand_card(game):
    left, right = game.hand.entities
    assert handle_mouse_press(game.table, 170, 610) is right
    assert game.table.dragged is right
    assert right.phase == Drag_Phase.DRAGGING


def test_press_on_empty_table_does_nothing(game):
    assert handle_mouse_press(game.table, 1200, 50) is None
    assert game.table.dragged is None


def test_release_over_empty_slot_plays_card(game):
    entity = game.hand.entities[0]
    slot = game.slots[0]

    assert handle_mouse_press(game.table, 5, 605) is entity
    handle_mouse_move(game.table, 450, 150)
    handle_mouse_release(game.table, 450, 150)

    assert entity.container is slot
    assert game.table.dragged is None
    assert (entity.x, entity.y) == (slot.x, slot.y)
    state = game.state
    assert state.cards_in_play == {entity}
    assert len(state.cards_in_hand) == 1
    assert state.doom_meter == 1
    assert state.resources[WOOD] == 8


def test_release_over_occupied_slot_snaps_back(game):
    played, held = game.hand.entities
    slot = game.slots[0]
    handle_mouse_press(game.table, 5, 605)
    handle_mouse_release(game.table, 450, 150)
    assert played.container is slot
    snapshot = (dict(game.state.resources), game.state.doom_meter, set(game.state.cards_in_hand), set(game.state.cards_in_play))

    assert handle_mouse_press(game.table, 5, 605) is held
    handle_mouse_move(game.table, 450, 150)
    handle_mouse_release(game.table, 450, 150)

    assert slot.entities == [played]
    assert held.container is game.hand
    assert game.hand.entities == [held]
    assert (held.x, held.y) == (game.hand.x, game.hand.y)
    assert snapshot == (dict(game.state.resources), game.state.doom_meter, set(game.state.cards_in_hand), set(game.state.cards_in_play))


def test_release_over_nothing_returns_to_hand(game):
    entity = game.hand.entities[0]
    handle_mouse_press(game.table, 5, 605)
    handle_mouse_move(game.table, 1300, 40)
    assert (entity.x, entity.y) == (1295, 35)
    handle_mouse_release(game.table, 1300, 40)
    assert entity.container is game.hand
    assert game.state.doom_meter == 0


def test_release_without_press_is_ignored(game):
    handle_mouse_release(game.table, 450, 150)
    assert all(not slot.entities for slot in game.slots)
    assert game.state.doom_meter == 0
