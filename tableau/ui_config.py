STACK_GAP_RATIO = 0.012
TOP_MARGIN_RATIO = 0.08
BOTTOM_BAR_RATIO = 0.2
CARD_WIDTH_RATIO = 0.085
CARD_HEIGHT_RATIO = 0.17
VISIBLE_STEP_RATIO = 0.04

NUMS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
SUIT_SYMBOL = "♠"
THEME_ORDER = ("Felt", "Ocean", "Sunset")
FONT_SCALE_ORDER = ("Small", "Normal", "Large")
FONT_SCALE_FACTOR = {
    "Small": 0.9,
    "Normal": 1.0,
    "Large": 1.25,
}

THEMES = {
    "Felt": {
        "bg_base": "#2a4d33",
        "bg_border": "#3e6b4a",
        "hud_text": "#f1f5f9",
        "deck_fill": "#1e40af",
        "deck_outline": "#ffffff",
        "slot_outline": "#7a9a82",
        "card_front": "#ffffff",
        "card_back": "#1e3a8a",
        "card_back_stripe": "#172554",
        "card_border": "#9ca3af",
        "card_text": "#000000",
    },
    "Ocean": {
        "bg_base": "#0b2545",
        "bg_border": "#1f4f73",
        "hud_text": "#e0f2fe",
        "deck_fill": "#0369a1",
        "deck_outline": "#7dd3fc",
        "slot_outline": "#67e8f9",
        "card_front": "#f8fafc",
        "card_back": "#1e3a8a",
        "card_back_stripe": "#082f49",
        "card_border": "#082f49",
        "card_text": "#0f172a",
    },
    "Sunset": {
        "bg_base": "#3f1d38",
        "bg_border": "#7c2d4f",
        "hud_text": "#fff7ed",
        "deck_fill": "#b45309",
        "deck_outline": "#fcd34d",
        "slot_outline": "#fdba74",
        "card_front": "#fffbeb",
        "card_back": "#7c2d12",
        "card_back_stripe": "#431407",
        "card_border": "#431407",
        "card_text": "#1c1917",
    },
}
