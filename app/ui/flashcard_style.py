"""
Flashcard style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "240px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#e8f4f8"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "3em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_SUBTITLE_FONT_SIZE = "1.4em"
DEFAULT_SUBTITLE_COLOR = "#666"
DEFAULT_CORNER_FONT_SIZE = "0.9em"
DEFAULT_CORNER_COLOR = "#666"


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for flashcards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    subtitle_font_size: str = DEFAULT_SUBTITLE_FONT_SIZE
    subtitle_color: str = DEFAULT_SUBTITLE_COLOR
    corner_font_size: str = DEFAULT_CORNER_FONT_SIZE
    corner_color: str = DEFAULT_CORNER_COLOR
    bg_color: str = FRONT_BG_COLOR


DEFAULT_FLASHCARD_STYLE = FlashcardStyle()


# ---- Character Card Presets ----

# Hanzi need a large glyph to be legible
CHARACTER_FRONT_STYLE = FlashcardStyle(
    main_font_size="5em",
    bg_color=FRONT_BG_COLOR,
)

CHARACTER_BACK_STYLE = FlashcardStyle(
    main_font_size="2.4em",
    subtitle_font_size="1.6em",
    subtitle_color="#2563eb",
    bg_color=BACK_BG_COLOR,
)
