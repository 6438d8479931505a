from __future__ import annotations
import random
from card_table.models import Container, Slot, Table_State
from ashfall.authority import Game_Authority
from ashfall.config import Rules
from ashfall.deck import Deck
from ashfall.events import Card_Played, Event_Bus
from ashfall.game import HAND, Game, draw_cards
from ashfall.models import Card_Definition, Game_State
from ashfall.registry import load_registry


def create_table(slot_count: int) -> Table_State:
    """Hand plus a row of empty play slots. Positions are set by the presentation layer."""
    hand = Container(name=HAND)
    slots = [Slot(name=f"slot_{i}") for i in range(slot_count)]
    return Table_State(containers=[hand, *slots])


def wire_slots(table: Table_State, bus: Event_Bus, authority: Game_Authority) -> None:
    for slot in table.slots():
        slot.accept_callback = authority.can_play
        slot.drop_callback = lambda entity, slot=slot: bus.publish(Card_Played(entity, slot))


def create_game(rules: Rules, pool: list[Card_Definition]) -> Game:
    """Initialize a new game and deal the opening hand."""
    state = Game_State()
    state.resources.update(rules.starting_resources)
    bus = Event_Bus()
    authority = Game_Authority(state, bus, rules)
    table = create_table(rules.slot_count)
    wire_slots(table, bus, authority)

    game = Game(
        rules=rules,
        deck=Deck(pool, depleting=rules.depleting_deck),
        state=state,
        table=table,
        bus=bus,
        authority=authority,
        rng=random.Random(rules.seed),
    )
    draw_cards(game, rules.hand_size)
    return game


def quick_setup(rules: Rules | None = None) -> Game:
    """Load the configured card file and start a game with it."""
    rules = rules or Rules()
    _, pool = load_registry(rules.cards_path)
    return create_game(rules, pool)
