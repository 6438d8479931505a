from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional
from card_table.models import Draggable
from ashfall.models import Card_Definition, Resource_Amount

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Card_Entity(Draggable):
    """A draggable card on the table, bound once to a shared definition."""
    definition: Optional[Card_Definition] = None

    def bind(self, definition: Card_Definition) -> bool:
        if self.definition is not None:
            logger.warning("Card already bound to %s; ignoring rebind to %s", self.definition.id, definition.id)
            return False
        self.definition = definition
        return True

    # Only the first amount is shown on the card face for now.
    def first_cost(self) -> Resource_Amount | None:
        if self.definition is None or not self.definition.cost:
            return None
        return self.definition.cost[0]

    def first_production(self) -> Resource_Amount | None:
        if self.definition is None or not self.definition.production:
            return None
        return self.definition.production[0]

    def __repr__(self) -> str:
        name = self.definition.id if self.definition else "unbound"
        return f"Card_Entity({name}@{id(self):x})"
