from __future__ import annotations
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Card_Drawn:
    entity: Any


@dataclass(frozen=True)
class Card_Played:
    entity: Any
    slot: Any = None


@dataclass(frozen=True)
class Card_Discarded:
    entity: Any


@dataclass(frozen=True)
class State_Changed:
    state: Any


class Event_Bus:
    """Synchronous publish/subscribe keyed by event class.

    Handlers run in subscription order, inside publish(). A failing handler is
    logged and the remaining handlers still run.
    """

    def __init__(self) -> None:
        self._subs: defaultdict[type, list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: Callable) -> None:
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._subs[event_type].append(handler)
        logger.debug("Subscribed %s to %s", getattr(handler, "__name__", handler), event_type.__name__)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        if handler in self._subs.get(event_type, []):
            self._subs[event_type].remove(handler)

    def publish(self, event) -> None:
        handlers = list(self._subs.get(type(event), []))
        logger.debug("Publishing %s to %d handlers", type(event).__name__, len(handlers))
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception("Handler %s failed on %s", getattr(handler, "__name__", handler), type(event).__name__)
