"""
Flashcard UI Component

Renders a character card, front (hanzi) or back (pinyin + translation).
"""

from __future__ import annotations

from html import escape

import streamlit as st

from app.ui.flashcard_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    CHARACTER_BACK_STYLE,
    CHARACTER_FRONT_STYLE,
    DEFAULT_FLASHCARD_STYLE,
    FlashcardStyle,
)
from core.flashcards import Character


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: FlashcardStyle | None = None,
) -> None:
    """
    Render a flashcard.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text (below main, smaller)
        corner_text: Optional text in top-right corner
        style: Style preset (defaults to DEFAULT_FLASHCARD_STYLE)
    """
    style = style or DEFAULT_FLASHCARD_STYLE

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 15px; right: 20px; '
            f'font-size: {style.corner_font_size}; color: {style.corner_color};">'
            f"{escape(corner_text)}</div>"
        )

    main_html = (
        f'<h1 style="font-size: {style.main_font_size}; color: {style.main_color}; '
        'font-weight: normal; margin: 0; text-align: center; line-height: 1.3; '
        f'overflow-wrap: anywhere;">{escape(main_text)}</h1>'
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.subtitle_font_size}; color: {style.subtitle_color}; '
            f'margin: 15px 0 0 0; text-align: center;">{escape(subtitle)}</p>'
        )

    html = (
        f'<div style="background-color: {style.bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}{subtitle_html}</div>'
    )

    st.markdown(html, unsafe_allow_html=True)


def render_character_card(character: Character, show_answer: bool) -> None:
    """
    Render the current study card.

    Front shows the hanzi; back shows pinyin and English with the hanzi
    in the corner.
    """
    if not show_answer:
        render_flashcard(
            main_text=character.chinese,
            corner_text=character.category,
            style=CHARACTER_FRONT_STYLE,
        )
        return

    render_flashcard(
        main_text=character.pinyin,
        subtitle=character.english,
        corner_text=character.chinese,
        style=CHARACTER_BACK_STYLE,
    )
