"""
Streamlit session state and database initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core import flashcards
from core.flashcards.constants import ALL_CATEGORIES


def init_database() -> None:
    """
    Initialize database schema (cached per Streamlit server process).
    """
    @st.cache_resource
    def _init_database() -> None:
        flashcards.init_db()

    _init_database()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "user" not in st.session_state:
        st.session_state.user = None
    if "characters" not in st.session_state:
        st.session_state.characters = []
    if "study_session" not in st.session_state:
        st.session_state.study_session = None
    if "selected_category" not in st.session_state:
        st.session_state.selected_category = ALL_CATEGORIES
    if "show_results" not in st.session_state:
        st.session_state.show_results = False
    if "show_answer" not in st.session_state:
        st.session_state.show_answer = False
    if "editing_character_id" not in st.session_state:
        st.session_state.editing_character_id = None
    if "show_form" not in st.session_state:
        st.session_state.show_form = False


def reset_user_state() -> None:
    """
    Clear everything tied to the signed-in user.
    """
    st.session_state.user = None
    st.session_state.characters = []
    st.session_state.study_session = None
    st.session_state.selected_category = ALL_CATEGORIES
    st.session_state.show_results = False
    st.session_state.show_answer = False
    st.session_state.editing_character_id = None
    st.session_state.show_form = False


def load_characters() -> list[flashcards.Character]:
    """
    Reload the signed-in user's collection into session_state.

    On a storage failure the previous list is kept and an error is shown.
    """
    user = st.session_state.user
    if user is None:
        st.session_state.characters = []
        return []
    try:
        st.session_state.characters = flashcards.get_characters(user.id)
    except flashcards.StorageError:
        st.error("Could not load your characters. Please try again.")
    return st.session_state.characters
