from __future__ import annotations
import logging
from card_table.models import Container, Drag_Phase, Draggable, Table_State
from card_table.table import move_to_container, update_positions

logger = logging.getLogger(__name__)


def begin_drag(table: Table_State, entity: Draggable, px: float, py: float) -> bool:
    """Pick an entity up. Its membership stays with the origin until release."""
    if entity.phase != Drag_Phase.IDLE:
        return False
    if table.dragged is not None:
        return False
    origin = entity.container
    entity.drag_origin = origin
    entity.parent_after_drag = origin
    entity.offset_x = px - entity.x
    entity.offset_y = py - entity.y
    entity.raycast_target = False
    entity.phase = Drag_Phase.DRAGGING
    table.dragged = entity
    if origin is not None:
        update_positions(origin, table)
    return True


def drag(entity: Draggable, px: float, py: float) -> None:
    if entity.phase != Drag_Phase.DRAGGING:
        return
    entity.x = px - entity.offset_x
    entity.y = py - entity.offset_y


def drop(entity: Draggable, target: Container) -> bool:
    """Offer the entity to a drop target. Must happen before end_drag."""
    if entity.phase != Drag_Phase.DRAGGING:
        return False
    entity.phase = Drag_Phase.RESOLVING
    return target.on_drop(entity)


def end_drag(table: Table_State, entity: Draggable) -> None:
    if entity.phase == Drag_Phase.IDLE:
        logger.debug("end_drag without begin_drag ignored")
        return

    origin = entity.drag_origin
    target = entity.parent_after_drag or origin
    table.dragged = None
    if target is not None and target is not entity.container:
        if not move_to_container(entity, target, table):
            logger.error("%s accepted the drop but was filled before release; entity returns to %s", target.name, origin.name if origin else None)
            target = origin

    entity.raycast_target = True
    entity.phase = Drag_Phase.IDLE
    entity.drag_origin = None
    entity.parent_after_drag = None
    entity.offset_x = 0.0
    entity.offset_y = 0.0

    for container in (origin, target):
        if container is not None:
            update_positions(container, table)
