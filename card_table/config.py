tweak = {
    # Window settings
    "window_width": 1400,
    "window_height": 900,
    "window_title": "Ashfall",
    "target_fps": 60,
    "background_color": (34, 30, 36, 255),

    # Card dimensions
    "card_width": 150,
    "card_height": 211,
    "card_corner_radius": 18,
    "card_padding": 8,

    # Card colors
    "card_background": (236, 228, 212, 255),
    "card_border": (80, 70, 60, 255),
    "card_title_color": (30, 30, 30, 255),
    "card_description_color": (70, 60, 55, 255),
    "cost_badge_color": (170, 60, 50, 255),
    "production_badge_color": (70, 140, 80, 255),

    # Font settings
    "title_font_size": 14,
    "description_font_size": 10,
    "badge_font_size": 16,
    "hud_font_size": 20,

    # Layout
    "hand_spread_x": 160,
    "slot_gap": 20,
    "margin": 20,
    "drag_raise": 8,  # Dragged card is drawn slightly lifted

    # UI colors
    "slot_outline": (120, 110, 100, 160),
    "slot_highlight": (255, 215, 0, 200),
    "hud_text_color": (230, 225, 215, 255),
    "doom_color": (200, 60, 60, 255),
    "button_color": (90, 70, 60, 255),
    "button_hover_color": (120, 95, 80, 255),
    "button_text_color": (255, 255, 255, 255),
}
