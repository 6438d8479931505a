from __future__ import annotations

import logging
from typing import Annotated

import typer
from pyray import *

from ashfall.config import Rules
from ashfall.events import Card_Drawn
from ashfall.game import Game, discard_card, end_turn
from ashfall.logging_config import configure_logging
from ashfall.registry import DEFAULT_CARDS_PATH
from ashfall.setup import quick_setup
from ashfall_graphical.hud import Hud
from ashfall_graphical.ui import Button, apply_table_layout, draw_button, draw_card_face, draw_hud
from card_table.config import tweak
from card_table.input import update_input
from card_table.rendering import draw_background, draw_table
from card_table.table import find_container_at

app = typer.Typer()
logger = logging.getLogger(__name__)


def play(game: Game) -> None:
    hud = Hud(game.state, game.bus)
    apply_table_layout(game.table)
    for entity in game.table.entities():
        entity.draw_callback = draw_card_face

    def on_drawn(event: Card_Drawn):
        event.entity.draw_callback = draw_card_face

    game.bus.subscribe(Card_Drawn, on_drawn)

    end_turn_button = Button(
        tweak["window_width"] - 160 - tweak["margin"],
        tweak["window_height"] // 2 - 20,
        160, 40, text="End turn",
    )

    set_config_flags(ConfigFlags.FLAG_WINDOW_HIGHDPI)
    init_window(tweak["window_width"], tweak["window_height"], tweak["window_title"])
    set_target_fps(tweak["target_fps"])

    while not window_should_close():
        update_input(game.table, on_right_click=lambda entity: discard_card(game, entity))

        mx, my = get_mouse_x(), get_mouse_y()
        click = is_mouse_button_pressed(MouseButton.MOUSE_BUTTON_LEFT)
        if game.table.dragged is None and end_turn_button.pressed(mx, my, click):
            end_turn(game)

        begin_drawing()
        draw_background()
        draw_table(game.table, hover=find_container_at(mx, my, game.table))
        draw_hud(hud)
        draw_button(end_turn_button, mx, my)
        end_drawing()

    close_window()


@app.command(name="play")
def play_command(
    seed: Annotated[int | None, typer.Option(help="Random seed for draws")] = None,
    cards: Annotated[str, typer.Option(help="Deck configuration JSON file")] = DEFAULT_CARDS_PATH,
    slots: Annotated[int, typer.Option(help="Number of play slots")] = 5,
    hand_size: Annotated[int, typer.Option(help="Cards in the opening hand")] = 5,
    check_affordability: Annotated[bool, typer.Option(help="Reject plays the player cannot pay for")] = False,
    depleting_deck: Annotated[bool, typer.Option(help="Remove drawn cards from the deck")] = False,
    log_level: Annotated[str | None, typer.Option(help="Logging level, e.g. DEBUG")] = None,
):
    configure_logging(level_name=log_level)
    rules = Rules(
        seed=seed,
        cards_path=cards,
        slot_count=slots,
        hand_size=hand_size,
        check_affordability=check_affordability,
        depleting_deck=depleting_deck,
    )
    try:
        game = quick_setup(rules)
    except (OSError, ValueError) as e:
        typer.echo(f"Could not load cards from {cards}: {e}", err=True)
        raise typer.Exit(1)
    logger.info("Starting game with %d cards in hand", len(game.state.cards_in_hand))
    play(game)


@app.callback()
def main():
    """Ashfall: build before the doom meter fills."""


if __name__ == "__main__":
    app()
