from __future__ import annotations
import json
import logging
import os
from ashfall.models import Card_Definition, Resource_Amount, Resource_Type

logger = logging.getLogger(__name__)

DEFAULT_CARDS_PATH = os.path.join(os.path.dirname(__file__), "cards.json")


class Card_Registry:
    """Catalog of card definitions, keyed by id. Definitions are frozen once added."""

    def __init__(self):
        self._definitions: dict[str, Card_Definition] = {}

    def register(self, definition: Card_Definition) -> None:
        if definition.id in self._definitions:
            raise ValueError(f"Duplicate card id: {definition.id}")
        self._definitions[definition.id] = definition

    def get(self, card_id: str) -> Card_Definition:
        return self._definitions[card_id]

    def definitions(self) -> list[Card_Definition]:
        return list(self._definitions.values())

    def __contains__(self, card_id: str) -> bool:
        return card_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)


def as_count(value, card_id: str, field_name: str) -> int:
    """JSON integers only: no floats, no booleans, no numeric strings."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{card_id}: {field_name} must be an integer, got {value!r}")
    return value


def parse_amounts(entries, card_id: str) -> tuple[Resource_Amount, ...]:
    """Accept either [{"type": "wood", "value": 2}, ...] or {"wood": 2, ...}."""
    if isinstance(entries, dict):
        entries = [{"type": k, "value": v} for k, v in entries.items()]
    amounts = []
    for entry in entries:
        if "type" not in entry:
            raise ValueError(f"{card_id}: resource amount missing 'type'")
        if "value" not in entry:
            raise ValueError(f"{card_id}: resource amount missing 'value'")
        try:
            resource = Resource_Type(entry["type"])
        except ValueError:
            raise ValueError(f"{card_id}: unknown resource {entry['type']!r}") from None
        amounts.append(Resource_Amount(resource, as_count(entry["value"], card_id, resource.value)))
    return tuple(amounts)


def create_definition(data: dict, base_dir: str | None = None) -> Card_Definition:
    """Image names are relative to base_dir, the directory of the card file."""
    if "id" not in data:
        raise ValueError(f"Card entry missing 'id': {data!r}")
    card_id = data["id"]
    image = data.get("image")
    if image and base_dir is not None:
        image = os.path.join(base_dir, image)
    return Card_Definition(
        id=card_id,
        image=image,
        description=data.get("description", ""),
        cost=parse_amounts(data.get("cost", []), card_id),
        production=parse_amounts(data.get("production", []), card_id),
        build_time=as_count(data.get("build_time", 0), card_id, "build_time"),
        damage=as_count(data.get("damage", 0), card_id, "damage"),
    )


def load_cards_from_json(filepath: str) -> dict:
    with open(filepath, 'r') as f:
        return json.load(f)


def load_registry(filepath: str = DEFAULT_CARDS_PATH) -> tuple[Card_Registry, list[Card_Definition]]:
    """Build the registry and the ordered draw pool from a deck configuration file.

    The file holds {"cards": [...], "deck": [card ids...]}. When "deck" is
    missing every registered card is in the pool once, in file order.
    """
    data = load_cards_from_json(filepath)
    base_dir = os.path.dirname(os.path.abspath(filepath))
    registry = Card_Registry()
    for entry in data.get("cards", []):
        registry.register(create_definition(entry, base_dir))

    deck_ids = data.get("deck")
    if deck_ids is None:
        pool = registry.definitions()
    else:
        unknown = [i for i in deck_ids if i not in registry]
        if unknown:
            raise ValueError(f"Deck references unknown cards: {', '.join(unknown)}")
        pool = [registry.get(i) for i in deck_ids]

    logger.info("Loaded %d card definitions, %d in deck from %s", len(registry), len(pool), filepath)
    return registry, pool
