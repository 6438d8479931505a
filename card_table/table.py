from __future__ import annotations
import logging
from card_table.models import Container, Draggable, Table_State
from card_table.config import tweak

logger = logging.getLogger(__name__)


def add_to_container(entity: Draggable, container: Container, table: Table_State | None = None) -> bool:
    """Append an entity to a container. Fails if it is full or the entity already has one."""
    if entity.container is not None:
        logger.warning("Entity already belongs to %s", entity.container.name)
        return False
    if container.is_full():
        logger.debug("%s is full", container.name)
        return False
    container.entities.append(entity)
    entity.container = container
    update_positions(container, table)
    return True


def remove_from_container(entity: Draggable, table: Table_State | None = None) -> Container | None:
    container = entity.container
    if container is None or entity not in container.entities:
        return None
    container.entities.remove(entity)
    entity.container = None
    update_positions(container, table)
    return container


def move_to_container(entity: Draggable, target: Container, table: Table_State | None = None) -> bool:
    """Transfer membership in one step. The entity stays where it was if the target is full."""
    source = entity.container
    if source is target:
        return True
    if target.is_full():
        return False
    if source is not None:
        source.entities.remove(entity)
    target.entities.append(entity)
    entity.container = target
    if source is not None:
        update_positions(source, table)
    update_positions(target, table)
    return True


def update_positions(container: Container, table: Table_State | None = None) -> None:
    """Lay out entities along the container's spread, skipping the one being dragged."""
    dragged = table.dragged if table is not None else None
    laid_out = [e for e in container.entities if e is not dragged]
    n = len(laid_out)
    spread_x = container.spread_x
    spread_y = container.spread_y
    if n > 1 and container.width > 0 and spread_x != 0:
        card_width = tweak["card_width"]
        total_width = (n - 1) * spread_x + card_width
        if total_width > container.width:
            spread_x = (container.width - card_width) / (n - 1)
    for i, entity in enumerate(laid_out):
        entity.x = container.x + i * spread_x
        entity.y = container.y + i * spread_y


def point_in_entity(px: float, py: float, entity: Draggable) -> bool:
    w = tweak["card_width"]
    h = tweak["card_height"]
    return entity.x <= px <= entity.x + w and entity.y <= py <= entity.y + h


def point_in_container_area(px: float, py: float, container: Container, table: Table_State | None = None) -> bool:
    """Check if point is in the container's area (for drop targets)."""
    w = tweak["card_width"]
    h = tweak["card_height"]
    dragged = table.dragged if table is not None else None
    laid_out = [e for e in container.entities if e is not dragged]
    if laid_out:
        last = laid_out[-1]
        return container.x <= px <= last.x + w and container.y <= py <= last.y + h
    return container.x <= px <= container.x + w and container.y <= py <= container.y + h


def find_entity_at(px: float, py: float, table: Table_State) -> Draggable | None:
    """Topmost raycast-enabled entity under the point."""
    for container in reversed(table.containers):
        for entity in reversed(container.entities):
            if entity.raycast_target and point_in_entity(px, py, entity):
                return entity
    return None


def find_container_at(px: float, py: float, table: Table_State) -> Container | None:
    for container in table.containers:
        if point_in_container_area(px, py, container, table):
            return container
    return None
