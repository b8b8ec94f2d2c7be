"""
Character management page: search, filter, add, edit and delete.
"""

from __future__ import annotations

from html import escape

import streamlit as st

from app.state import load_characters
from app.ui import render_category_filter, render_character_form
from core import flashcards


def _editing_character() -> flashcards.Character | None:
    character_id = st.session_state.editing_character_id
    if character_id is None:
        return None
    return next((c for c in st.session_state.characters if c.id == character_id), None)


def _close_form() -> None:
    st.session_state.show_form = False
    st.session_state.editing_character_id = None


def _render_form() -> None:
    user_id = st.session_state.user.id
    editing = _editing_character()
    data, cancelled = render_character_form(editing)

    if cancelled:
        _close_form()
        st.rerun()
    if data is None:
        return

    try:
        if editing is not None:
            flashcards.update_character(user_id, editing.id, data)
        else:
            flashcards.add_character(user_id, data)
    except flashcards.StorageError:
        st.error("Failed to save character. Please try again.")
        return

    _close_form()
    load_characters()
    st.rerun()


def _render_character_card(character: flashcards.Character) -> None:
    with st.container(border=True):
        st.markdown(f"<h2 style='text-align:center;margin:0'>{escape(character.chinese)}</h2>", unsafe_allow_html=True)
        st.markdown(f"<p style='text-align:center;color:#2563eb;margin:0'>{escape(character.pinyin)}</p>", unsafe_allow_html=True)
        st.markdown(f"<p style='text-align:center;margin:0'>{escape(character.english)}</p>", unsafe_allow_html=True)
        st.caption(f"{character.category} · score {character.score} · {character.correct_count}/{character.attempts} correct")

        col1, col2 = st.columns(2)
        with col1:
            if st.button("✏️ Edit", key=f"edit_{character.id}", use_container_width=True):
                st.session_state.editing_character_id = character.id
                st.session_state.show_form = True
                st.rerun()
        with col2:
            if st.button("🗑️ Delete", key=f"delete_{character.id}", use_container_width=True):
                try:
                    flashcards.delete_character(st.session_state.user.id, character.id)
                except flashcards.StorageError:
                    st.error("Failed to delete character.")
                else:
                    load_characters()
                    st.rerun()


def render_manage_page() -> None:
    """
    Render the character management page.
    """
    if st.session_state.show_form:
        _render_form()
        return

    characters = st.session_state.characters

    col1, col2 = st.columns([4, 1])
    with col1:
        st.subheader("Manage Characters")
    with col2:
        if st.button("➕ Add", type="primary", use_container_width=True):
            st.session_state.editing_character_id = None
            st.session_state.show_form = True
            st.rerun()

    search_term = st.text_input(
        "Search",
        placeholder="Search characters, pinyin, english, or category...",
    )
    selected_category = render_category_filter(
        flashcards.derive_categories(characters),
        flashcards.count_by_category(characters),
        key="manage_category",
    )
    filtered = flashcards.filter_characters(characters, selected_category, search_term)

    st.caption(f"Showing {len(filtered)} of {len(characters)} characters")

    if not filtered:
        if not characters:
            st.info("No characters found. Add your first character!")
        else:
            st.info("No characters match your search criteria.")
        return

    columns = st.columns(3)
    for idx, character in enumerate(filtered):
        with columns[idx % 3]:
            _render_character_card(character)
