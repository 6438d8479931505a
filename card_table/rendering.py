from __future__ import annotations
from pyray import *
from card_table.models import Container, Draggable, Slot, Table_State
from card_table.config import tweak

# Texture cache to avoid reloading images
_rounded_texture_cache: dict[str, Texture2D] = {}


def get_rounded_texture(image_path: str) -> Texture2D | None:
    """Load a texture with rounded corners applied, using cache."""
    if image_path in _rounded_texture_cache:
        return _rounded_texture_cache[image_path]

    if not file_exists(image_path):
        return None

    w = tweak["card_width"]
    h = tweak["card_height"]
    r = tweak["card_corner_radius"]

    image = load_image(image_path)
    iw = image.width
    ih = image.height

    # Scale corner radius to match image resolution
    sr = int(r * min(iw / w, ih / h))

    mask = gen_image_color(iw, ih, Color(0, 0, 0, 0))
    image_draw_rectangle(mask, sr, 0, iw - 2 * sr, ih, WHITE)
    image_draw_rectangle(mask, 0, sr, iw, ih - 2 * sr, WHITE)
    image_draw_circle(mask, sr, sr, sr, WHITE)
    image_draw_circle(mask, iw - sr, sr, sr, WHITE)
    image_draw_circle(mask, sr, ih - sr, sr, WHITE)
    image_draw_circle(mask, iw - sr, ih - sr, sr, WHITE)

    image_alpha_mask(image, mask)
    texture = load_texture_from_image(image)

    unload_image(image)
    unload_image(mask)

    _rounded_texture_cache[image_path] = texture
    return texture


def color_from_tuple(c: tuple) -> Color:
    """Convert RGBA tuple to raylib Color."""
    return Color(c[0], c[1], c[2], c[3])


def draw_background() -> None:
    clear_background(color_from_tuple(tweak["background_color"]))


def draw_blank_card() -> None:
    w = tweak["card_width"]
    h = tweak["card_height"]
    r = tweak["card_corner_radius"]
    draw_rectangle_rounded(
        Rectangle(0, 0, w, h), r / min(w, h), 8,
        color_from_tuple(tweak["card_background"])
    )
    draw_rectangle_rounded_lines_ex(
        Rectangle(0, 0, w, h), r / min(w, h), 8, 2,
        color_from_tuple(tweak["card_border"])
    )


def draw_entity(entity: Draggable, lifted: bool = False) -> None:
    """Draw an entity at its position; its draw_callback paints the face at the origin."""
    y = entity.y - (tweak["drag_raise"] if lifted else 0)
    rl_push_matrix()
    rl_translatef(entity.x, y, 0)
    if entity.draw_callback:
        entity.draw_callback(entity)
    else:
        draw_blank_card()
    rl_pop_matrix()


def draw_container_placeholder(container: Container, highlight: bool = False) -> None:
    """Outline where an empty container or slot sits."""
    w = tweak["card_width"]
    h = tweak["card_height"]
    r = tweak["card_corner_radius"]
    color = tweak["slot_highlight"] if highlight else tweak["slot_outline"]
    draw_rectangle_rounded_lines_ex(
        Rectangle(container.x, container.y, w, h), r / min(w, h), 8, 2,
        color_from_tuple(color)
    )


def draw_table(table: Table_State, hover: Container | None = None) -> None:
    # Empty slot outlines first, so cards cover them
    for container in table.containers:
        if isinstance(container, Slot) or not container.entities:
            highlight = hover is container and table.dragged is not None and not container.entities
            draw_container_placeholder(container, highlight)

    for container in table.containers:
        for entity in container.entities:
            if entity is table.dragged:
                continue
            draw_entity(entity)

    # Dragged entity on top of everything
    if table.dragged is not None:
        draw_entity(table.dragged, lifted=True)

    if table.draw_callback is not None:
        table.draw_callback(table)
