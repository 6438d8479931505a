from ashfall.authority import Game_Authority
from ashfall.config import Rules
from ashfall.entity import Card_Entity
from ashfall.events import Card_Discarded, Card_Drawn, Card_Played, Event_Bus, State_Changed
from ashfall.models import Card_Definition, Game_State, Resource_Amount, Resource_Type

WOOD = Resource_Type.WOOD
GOLD = Resource_Type.GOLD
STONE = Resource_Type.STONE


def make_authority(rules=None, **resources):
    state = Game_State()
    for name, value in resources.items():
        state.resources[Resource_Type(name)] = value
    bus = Event_Bus()
    authority = Game_Authority(state, bus, rules)
    changes = []
    bus.subscribe(State_Changed, changes.append)
    return authority, bus, changes


def drawn_entity(bus, definition):
    entity = Card_Entity()
    entity.bind(definition)
    bus.publish(Card_Drawn(entity))
    return entity


def test_drawn_card_enters_hand():
    authority, bus, changes = make_authority()
    entity = drawn_entity(bus, Card_Definition(id="x"))
    assert authority.state.cards_in_hand == {entity}
    assert len(changes) == 1


def test_play_deducts_exact_cost_and_bumps_doom():
    authority, bus, changes = make_authority(wood=5, gold=4, stone=3)
    definition = Card_Definition(id="hall", cost=(Resource_Amount(WOOD, 2), Resource_Amount(GOLD, 1)))
    entity = drawn_entity(bus, definition)

    bus.publish(Card_Played(entity))

    state = authority.state
    assert state.resources[WOOD] == 3
    assert state.resources[GOLD] == 3
    assert state.resources[STONE] == 3
    assert state.resources[Resource_Type.FOOD] == 0
    assert state.doom_meter == 1
    assert state.cards_in_hand == set()
    assert state.cards_in_play == {entity}
    assert changes[-1].state is state


def test_play_can_go_negative_by_default():
    authority, bus, _ = make_authority(wood=1)
    entity = drawn_entity(bus, Card_Definition(id="big", cost=(Resource_Amount(WOOD, 4),)))
    assert authority.can_play(entity)
    bus.publish(Card_Played(entity))
    assert authority.state.resources[WOOD] == -3


def test_affordability_gate_when_enabled():
    authority, bus, _ = make_authority(Rules(check_affordability=True), wood=1)
    expensive = drawn_entity(bus, Card_Definition(id="big", cost=(Resource_Amount(WOOD, 4),)))
    cheap = drawn_entity(bus, Card_Definition(id="small", cost=(Resource_Amount(WOOD, 1),)))
    assert not authority.can_play(expensive)
    assert authority.can_play(cheap)


def test_only_hand_cards_can_be_played():
    authority, bus, _ = make_authority()
    entity = drawn_entity(bus, Card_Definition(id="x"))
    bus.publish(Card_Played(entity))
    assert not authority.can_play(entity)
    assert not authority.can_play(Card_Entity())


def test_discard_removes_from_either_set():
    authority, bus, _ = make_authority()
    in_hand = drawn_entity(bus, Card_Definition(id="a"))
    in_play = drawn_entity(bus, Card_Definition(id="b"))
    bus.publish(Card_Played(in_play))

    bus.publish(Card_Discarded(in_hand))
    bus.publish(Card_Discarded(in_play))

    state = authority.state
    assert state.cards_in_hand == set()
    assert state.cards_in_play == set()
    assert state.build_progress == {}
    assert not state.is_live(in_hand)


def test_production_waits_for_build_time():
    authority, bus, _ = make_authority()
    definition = Card_Definition(id="mine", production=(Resource_Amount(GOLD, 2),), build_time=2)
    entity = drawn_entity(bus, definition)
    bus.publish(Card_Played(entity))

    gold = []
    for _ in range(4):
        authority.end_turn()
        gold.append(authority.state.resources[GOLD])
    assert gold == [0, 0, 2, 4]
    assert authority.state.turn == 4


def test_zero_build_time_produces_on_first_turn_end():
    authority, bus, _ = make_authority(wood=0)
    entity = drawn_entity(bus, Card_Definition(id="camp", production=(Resource_Amount(WOOD, 3),)))
    bus.publish(Card_Played(entity))
    authority.end_turn()
    assert authority.state.resources[WOOD] == 3


def test_cards_in_hand_do_not_produce():
    authority, bus, _ = make_authority()
    drawn_entity(bus, Card_Definition(id="camp", production=(Resource_Amount(WOOD, 3),)))
    authority.end_turn()
    assert authority.state.resources[WOOD] == 0
