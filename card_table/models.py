from __future__ import annotations
import logging
import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Drag_Phase(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    RESOLVING = "resolving"  # drop target resolved, waiting for release


@dataclass(eq=False)
class Draggable:
    x: float = 0.0
    y: float = 0.0
    raycast_target: bool = True  # False while dragged, so hit tests skip it
    phase: Drag_Phase = Drag_Phase.IDLE
    offset_x: float = 0.0
    offset_y: float = 0.0
    draw_callback: Callable | None = field(default=None, repr=False)

    # Back-references are weak: containers own their entities, not the reverse.
    _container: Optional[weakref.ref] = field(default=None, repr=False)
    _drag_origin: Optional[weakref.ref] = field(default=None, repr=False)
    _parent_after_drag: Optional[weakref.ref] = field(default=None, repr=False)

    @property
    def container(self) -> Container | None:
        return self._container() if self._container else None

    @container.setter
    def container(self, value: Container | None) -> None:
        self._container = weakref.ref(value) if value is not None else None

    @property
    def drag_origin(self) -> Container | None:
        return self._drag_origin() if self._drag_origin else None

    @drag_origin.setter
    def drag_origin(self, value: Container | None) -> None:
        self._drag_origin = weakref.ref(value) if value is not None else None

    @property
    def parent_after_drag(self) -> Container | None:
        return self._parent_after_drag() if self._parent_after_drag else None

    @parent_after_drag.setter
    def parent_after_drag(self, value: Container | None) -> None:
        self._parent_after_drag = weakref.ref(value) if value is not None else None


@dataclass(eq=False)
class Container:
    name: str
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0     # 0 means unbounded
    spread_x: float = 0.0  # Horizontal offset between entities
    spread_y: float = 0.0  # Vertical offset between entities
    capacity: Optional[int] = None  # None means unlimited
    entities: list[Draggable] = field(default_factory=list, repr=False)

    def is_full(self) -> bool:
        return self.capacity is not None and len(self.entities) >= self.capacity

    def on_drop(self, entity: Draggable) -> bool:
        """Plain containers have no drop side; the entity goes back to its origin."""
        return False


@dataclass(eq=False)
class Slot(Container):
    capacity: Optional[int] = 1
    accept_callback: Callable[[Draggable], bool] | None = field(default=None, repr=False)
    drop_callback: Callable[[Draggable], None] | None = field(default=None, repr=False)

    def on_drop(self, entity: Draggable) -> bool:
        """Claim a dragged entity if the slot is empty and the accept check passes."""
        if self.entities:
            logger.debug("Drop on %s rejected: occupied", self.name)
            return False
        if self.accept_callback is not None and not self.accept_callback(entity):
            logger.debug("Drop on %s rejected by accept check", self.name)
            return False
        entity.parent_after_drag = self
        if self.drop_callback is not None:
            self.drop_callback(entity)
        return True


@dataclass
class Table_State:
    containers: list[Container] = field(default_factory=list)
    dragged: Draggable | None = None  # drawn above every container
    draw_callback: Callable | None = None

    def container(self, name: str) -> Container:
        for c in self.containers:
            if c.name == name:
                return c
        raise KeyError(name)

    def slots(self) -> list[Slot]:
        return [c for c in self.containers if isinstance(c, Slot)]

    def entities(self) -> list[Draggable]:
        return [e for c in self.containers for e in c.entities]
