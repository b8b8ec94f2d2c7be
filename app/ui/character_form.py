"""
Character add / edit form.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st
from pydantic import ValidationError

from core.flashcards import Character, CharacterInput, validation_messages


def render_character_form(character: Optional[Character] = None) -> tuple[Optional[CharacterInput], bool]:
    """
    Render the character form.

    Args:
        character: Character being edited, or None to add a new one

    Returns:
        (validated input or None, cancel clicked)
    """
    title = "Edit Character" if character else "Add New Character"
    form_key = f"character_form_{character.id}" if character else "character_form_new"

    with st.form(form_key):
        st.subheader(title)
        chinese = st.text_input("Chinese Character", value=character.chinese if character else "", placeholder="你好")
        pinyin = st.text_input("Pinyin", value=character.pinyin if character else "", placeholder="nǐ hǎo")
        english = st.text_input("English Translation", value=character.english if character else "", placeholder="hello")
        category = st.text_input("Category", value=character.category if character else "", placeholder="Greetings")

        col1, col2 = st.columns(2)
        with col1:
            submitted = st.form_submit_button(
                "Update Character" if character else "Add Character",
                type="primary",
                use_container_width=True,
            )
        with col2:
            cancelled = st.form_submit_button("Cancel", use_container_width=True)

    if cancelled or not submitted:
        return None, cancelled

    try:
        data = CharacterInput(chinese=chinese, pinyin=pinyin, english=english, category=category)
    except ValidationError as exc:
        for message in validation_messages(exc).values():
            st.error(message)
        return None, False

    return data, False
