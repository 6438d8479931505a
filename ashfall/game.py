from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from card_table.models import Container, Slot, Table_State
from card_table.table import add_to_container, remove_from_container
from ashfall.authority import Game_Authority
from ashfall.config import Rules
from ashfall.deck import Deck
from ashfall.entity import Card_Entity
from ashfall.events import Card_Discarded, Card_Drawn, Event_Bus
from ashfall.models import Game_State

logger = logging.getLogger(__name__)

HAND = "hand"


@dataclass
class Game:
    rules: Rules
    deck: Deck
    state: Game_State
    table: Table_State
    bus: Event_Bus
    authority: Game_Authority
    rng: random.Random = field(default_factory=random.Random)

    @property
    def hand(self) -> Container:
        return self.table.container(HAND)

    @property
    def slots(self) -> list[Slot]:
        return self.table.slots()


def draw_card(game: Game) -> Card_Entity | None:
    """Draw a card from the deck into the hand."""
    definition = game.deck.pick(game.rng)
    if definition is None:
        return None
    entity = Card_Entity()
    entity.bind(definition)
    add_to_container(entity, game.hand, game.table)
    logger.debug("Drew %s", definition.id)
    game.bus.publish(Card_Drawn(entity))
    return entity


def draw_cards(game: Game, n: int) -> list[Card_Entity]:
    drawn = []
    for _ in range(n):
        entity = draw_card(game)
        if entity is None:
            break
        drawn.append(entity)
    return drawn


def discard_card(game: Game, entity: Card_Entity) -> None:
    """Take a card off the table for good."""
    if entity is game.table.dragged:
        logger.debug("Cannot discard a card mid-drag")
        return
    if remove_from_container(entity, game.table) is None:
        return
    game.bus.publish(Card_Discarded(entity))


def end_turn(game: Game) -> list[Card_Entity]:
    game.authority.end_turn()
    return draw_cards(game, game.rules.draw_per_turn)
