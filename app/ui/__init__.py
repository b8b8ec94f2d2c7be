"""UI Components for the flashcard app"""

from app.ui.flashcard import render_flashcard, render_character_card
from app.ui.session_stats import render_session_stats, render_session_complete
from app.ui.answer_buttons import render_answer_buttons
from app.ui.category_filter import render_category_filter
from app.ui.character_form import render_character_form

__all__ = [
    "render_flashcard",
    "render_character_card",
    "render_session_stats",
    "render_session_complete",
    "render_answer_buttons",
    "render_category_filter",
    "render_character_form",
]
