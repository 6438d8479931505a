from __future__ import annotations
from typing import Callable
from pyray import *
from card_table.models import Draggable, Table_State
import card_table.drag as dg
from card_table.table import find_container_at, find_entity_at


def handle_mouse_press(table: Table_State, mx: float, my: float) -> Draggable | None:
    """Start a drag on the topmost entity under the pointer."""
    entity = find_entity_at(mx, my, table)
    if entity is None:
        return None
    if dg.begin_drag(table, entity, mx, my):
        return entity
    return None


def handle_mouse_release(table: Table_State, mx: float, my: float) -> None:
    """Resolve the drop target first, then finish the drag."""
    entity = table.dragged
    if entity is None:
        return
    target = find_container_at(mx, my, table)
    if target is not None:
        dg.drop(entity, target)
    dg.end_drag(table, entity)


def handle_mouse_move(table: Table_State, mx: float, my: float) -> None:
    if table.dragged is not None:
        dg.drag(table.dragged, mx, my)


def update_input(table: Table_State, on_right_click: Callable[[Draggable], None] | None = None) -> None:
    """Main input processing - call each frame."""
    mx = get_mouse_x()
    my = get_mouse_y()
    if is_mouse_button_pressed(MouseButton.MOUSE_BUTTON_LEFT):
        handle_mouse_press(table, mx, my)
    elif is_mouse_button_released(MouseButton.MOUSE_BUTTON_LEFT):
        handle_mouse_release(table, mx, my)

    # Update drag position continuously
    handle_mouse_move(table, mx, my)

    if on_right_click is not None and is_mouse_button_pressed(MouseButton.MOUSE_BUTTON_RIGHT):
        if table.dragged is None:
            entity = find_entity_at(mx, my, table)
            if entity is not None:
                on_right_click(entity)
