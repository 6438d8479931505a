from __future__ import annotations
import os
from dataclasses import dataclass

from pyray import *

from card_table.config import tweak
from card_table.models import Table_State
from card_table.rendering import color_from_tuple, draw_blank_card, get_rounded_texture
from card_table.table import update_positions
from ashfall.entity import Card_Entity
from ashfall.game import HAND
from ashfall_graphical.hud import Hud


def apply_table_layout(table: Table_State) -> None:
    """Place the slot row in the middle of the window and the hand along the bottom."""
    W = tweak["window_width"]
    H = tweak["window_height"]
    w = tweak["card_width"]
    h = tweak["card_height"]
    margin = tweak["margin"]
    gap = tweak["slot_gap"]

    slots = table.slots()
    row_width = len(slots) * w + max(len(slots) - 1, 0) * gap
    start_x = (W - row_width) // 2
    slots_y = H // 2 - h // 2 - margin
    for i, slot in enumerate(slots):
        slot.x = start_x + i * (w + gap)
        slot.y = slots_y

    hand = table.container(HAND)
    hand.x = margin
    hand.y = H - h - margin
    hand.width = W - 2 * margin
    hand.spread_x = tweak["hand_spread_x"]

    for container in table.containers:
        update_positions(container, table)


def get_image_path(image: str | None) -> str | None:
    """Cards whose image is missing on disk are drawn blank."""
    if image and os.path.exists(image):
        return image
    return None


def point_in_rect(mx: float, my: float, x: float, y: float, w: float, h: float) -> bool:
    return x <= mx <= x + w and y <= my <= y + h


@dataclass
class Button:
    x: int
    y: int
    width: int
    height: int
    text: str = ""

    def pressed(self, mx, my, click) -> bool:
        if not click:
            return False
        return point_in_rect(mx, my, self.x, self.y, self.width, self.height)


# --- Card rendering ---

def draw_badge(text: str, cx: int, cy: int, color: tuple) -> None:
    radius = int(0.12 * tweak["card_width"])
    size = tweak["badge_font_size"]
    draw_circle(cx, cy, radius, color_from_tuple(color))
    tw = measure_text(text, size)
    draw_text(text, cx - tw // 2, cy - size // 2, size, WHITE)


def wrap_text(text: str, size: int, max_width: int) -> list[str]:
    lines = []
    current_line = ""
    for word in text.split():
        test_line = current_line + " " + word if current_line else word
        if measure_text(test_line, size) <= max_width:
            current_line = test_line
        else:
            if current_line:
                lines.append(current_line)
            current_line = word
    if current_line:
        lines.append(current_line)
    return lines


def draw_card_face(entity: Card_Entity) -> None:
    """Image, title, description and the first cost and production amounts."""
    w = tweak["card_width"]
    h = tweak["card_height"]
    padding = tweak["card_padding"]
    definition = entity.definition

    texture = None
    image_path = get_image_path(definition.image)
    if image_path:
        texture = get_rounded_texture(image_path)
    if texture:
        draw_texture_pro(texture, Rectangle(0, 0, texture.width, texture.height), Rectangle(0, 0, w, h), Vector2(0, 0), 0, WHITE)
    else:
        draw_blank_card()

    title_size = tweak["title_font_size"]
    draw_text(definition.title, padding, padding, title_size, color_from_tuple(tweak["card_title_color"]))

    desc_size = tweak["description_font_size"]
    desc_y = padding + title_size + 10
    for i, line in enumerate(wrap_text(definition.description, desc_size, w - 2 * padding)):
        draw_text(line, padding, desc_y + i * (desc_size + 2), desc_size, color_from_tuple(tweak["card_description_color"]))

    cost = entity.first_cost()
    if cost is not None:
        draw_badge(f"-{cost.value}", int(0.16 * w), h - int(0.16 * w), tweak["cost_badge_color"])
        draw_text(cost.resource_type.value, padding, h - int(0.32 * w) - desc_size, desc_size, color_from_tuple(tweak["card_description_color"]))
    production = entity.first_production()
    if production is not None:
        draw_badge(f"+{production.value}", w - int(0.16 * w), h - int(0.16 * w), tweak["production_badge_color"])
        label = production.resource_type.value
        draw_text(label, w - padding - measure_text(label, desc_size), h - int(0.32 * w) - desc_size, desc_size, color_from_tuple(tweak["card_description_color"]))


# --- HUD ---

def draw_hud(hud: Hud) -> None:
    data = hud.get_display_data()
    size = tweak["hud_font_size"]
    margin = tweak["margin"]
    color = color_from_tuple(tweak["hud_text_color"])
    draw_text(f"Turn {data['turn']}", margin, margin, size, color)
    draw_text(hud.resource_line(), margin, margin + size + 8, size, color)
    doom_text = f"Doom {data['doom']}"
    draw_text(doom_text, tweak["window_width"] - margin - measure_text(doom_text, size * 2), margin, size * 2, color_from_tuple(tweak["doom_color"]))


def draw_button(button: Button, mx: float, my: float) -> None:
    hover = point_in_rect(mx, my, button.x, button.y, button.width, button.height)
    color = tweak["button_hover_color"] if hover else tweak["button_color"]
    draw_rectangle_rounded(Rectangle(button.x, button.y, button.width, button.height), 0.3, 8, color_from_tuple(color))
    size = tweak["hud_font_size"]
    tw = measure_text(button.text, size)
    draw_text(button.text, button.x + (button.width - tw) // 2, button.y + (button.height - size) // 2, size, color_from_tuple(tweak["button_text_color"]))
