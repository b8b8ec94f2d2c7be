"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import end_session, process_answer, start_new_session
from app.ui import (
    render_answer_buttons,
    render_character_card,
    render_session_complete,
    render_session_stats,
)
from core import flashcards
from core.flashcards.constants import ALL_CATEGORIES, ALL_CATEGORIES_LABEL


def render_study_page() -> None:
    """
    Render the study flow (category menu, active session or results).
    """
    session = st.session_state.study_session

    if session is not None and st.session_state.show_results:
        _render_results(session)
    elif session is not None and not flashcards.is_session_complete(session):
        _render_active_session(session)
    else:
        _render_category_menu()


def _category_label(category: str) -> str:
    return ALL_CATEGORIES_LABEL if flashcards.is_unfiltered(category) else category


def _render_category_menu() -> None:
    characters = st.session_state.characters

    st.markdown("Master Chinese characters by practicing what you know least.")

    if not characters:
        st.info("No characters available to study. Add some on the **Manage** tab.")
        return

    categories = flashcards.derive_categories(characters)
    counts = flashcards.count_by_category(characters)

    options = [(ALL_CATEGORIES, len(characters))] + [(c, counts[c]) for c in categories]
    columns = st.columns(3)
    for idx, (category, count) in enumerate(options):
        with columns[idx % 3]:
            icon = "📚" if category == ALL_CATEGORIES else "📁"
            label = f"{icon} {_category_label(category)}\n\n{count} characters"
            if st.button(label, key=f"start_{category}", use_container_width=True):
                if start_new_session(category):
                    st.rerun()


def _render_active_session(session: flashcards.StudySession) -> None:
    character = flashcards.get_current_character(session)

    render_session_stats(session, _category_label(st.session_state.selected_category))
    st.markdown("<br>", unsafe_allow_html=True)

    render_character_card(character, st.session_state.show_answer)
    st.markdown("<br>", unsafe_allow_html=True)

    if not st.session_state.show_answer:
        if st.button("Reveal Answer", use_container_width=True, type="primary"):
            st.session_state.show_answer = True
            st.rerun()
    else:
        answer = render_answer_buttons(key_suffix=f"{session.current_index}_{character.id}")
        if answer is not None:
            process_answer(answer)
            st.rerun()

    st.markdown("<br>", unsafe_allow_html=True)
    if st.button("↺ End Session"):
        end_session()
        st.rerun()


def _render_results(session: flashcards.StudySession) -> None:
    render_session_complete(session)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Study Again", type="primary", use_container_width=True):
            if start_new_session(st.session_state.selected_category):
                st.rerun()
    with col2:
        if st.button("↺ Back to Menu", use_container_width=True):
            end_session()
            st.rerun()
