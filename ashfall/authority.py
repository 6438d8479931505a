from __future__ import annotations
import logging
from ashfall.config import Rules
from ashfall.entity import Card_Entity
from ashfall.events import Card_Discarded, Card_Drawn, Card_Played, Event_Bus, State_Changed
from ashfall.models import Card_Definition, Game_State

logger = logging.getLogger(__name__)


class Game_Authority:
    """Sole writer of Game_State.

    Interaction code never touches the state; it publishes events on the bus and
    the authority applies their consequences, then announces State_Changed.
    """

    def __init__(self, state: Game_State, bus: Event_Bus, rules: Rules | None = None):
        self.state = state
        self.bus = bus
        self.rules = rules or Rules()
        bus.subscribe(Card_Drawn, self.on_card_drawn)
        bus.subscribe(Card_Played, self.on_card_played)
        bus.subscribe(Card_Discarded, self.on_card_discarded)

    def affordable(self, definition: Card_Definition) -> bool:
        return all(self.state.resources.get(a.resource_type, 0) >= a.value for a in definition.cost)

    def can_play(self, entity: Card_Entity) -> bool:
        """Only cards still in hand may be played, and only if affordable when that rule is on."""
        if entity.definition is None:
            return False
        if entity not in self.state.cards_in_hand:
            return False
        if self.rules.check_affordability and not self.affordable(entity.definition):
            logger.info("Cannot afford %s", entity.definition.id)
            return False
        return True

    def on_card_drawn(self, event: Card_Drawn) -> None:
        self.state.cards_in_hand.add(event.entity)
        self.notify()

    def on_card_played(self, event: Card_Played) -> None:
        entity = event.entity
        state = self.state
        state.cards_in_hand.discard(entity)
        state.cards_in_play.add(entity)
        state.doom_meter += 1
        for amount in entity.definition.cost:
            state.resources[amount.resource_type] = state.resources.get(amount.resource_type, 0) - amount.value
        state.build_progress[entity] = entity.definition.build_time
        logger.info("Played %s (doom %d)", entity.definition.id, state.doom_meter)
        self.notify()

    def on_card_discarded(self, event: Card_Discarded) -> None:
        entity = event.entity
        self.state.cards_in_hand.discard(entity)
        self.state.cards_in_play.discard(entity)
        self.state.build_progress.pop(entity, None)
        self.notify()

    def end_turn(self) -> None:
        """Advance construction, then collect production from finished buildings."""
        state = self.state
        state.turn += 1
        for entity in list(state.cards_in_play):
            remaining = state.build_progress.get(entity, 0)
            if remaining > 0:
                state.build_progress[entity] = remaining - 1
                continue
            for amount in entity.definition.production:
                state.resources[amount.resource_type] = state.resources.get(amount.resource_type, 0) + amount.value
        logger.info("Turn %d ended", state.turn)
        self.notify()

    def notify(self) -> None:
        self.bus.publish(State_Changed(self.state))
