from __future__ import annotations
import logging
import random
from ashfall.models import Card_Definition

logger = logging.getLogger(__name__)


class Deck:
    """Ordered pool of definitions to draw from.

    By default picks are made with replacement, so the deck never runs out.
    A depleting deck removes each picked definition and returns None once empty.
    """

    def __init__(self, pool: list[Card_Definition], depleting: bool = False):
        self.pool = list(pool)
        self.depleting = depleting

    def pick(self, rng: random.Random) -> Card_Definition | None:
        if not self.pool:
            logger.info("Deck is empty")
            return None
        index = rng.randrange(len(self.pool))
        if self.depleting:
            return self.pool.pop(index)
        return self.pool[index]

    def __len__(self) -> int:
        return len(self.pool)
