"""
Session lifecycle helpers for Streamlit app.
"""

from __future__ import annotations

import logging

import streamlit as st

from app.state import load_characters
from core import flashcards
from core.config import get_settings

logger = logging.getLogger(__name__)


def start_new_session(category: str) -> bool:
    """
    Start a new study session for a category ("all" for a mixed session).

    Returns:
        True if a session was started
    """
    user = st.session_state.user
    st.session_state.selected_category = category

    try:
        items = flashcards.get_study_session(
            user.id,
            category,
            limit=get_settings().session_size,
        )
    except flashcards.StorageError:
        st.error("Could not load characters for this session. Please try again.")
        return False

    if not items:
        st.info("No characters available to study.")
        return False

    st.session_state.study_session = flashcards.create_session(items)
    st.session_state.show_results = False
    st.session_state.show_answer = False
    logger.info("Started session for user %s: %d cards (category=%s)", user.id, len(items), category)
    return True


def process_answer(is_correct: bool) -> None:
    """
    Record an answer for the current card and move to the next one.

    The answer is written to the database first. A failed write is reported
    but the session continues with its in-memory tallies.
    """
    session = st.session_state.study_session
    if session is None or flashcards.is_session_complete(session):
        return

    character = flashcards.get_current_character(session)
    try:
        flashcards.record_answer(st.session_state.user.id, character.id, is_correct)
    except flashcards.StorageError:
        logger.warning("Answer for %s was not saved", character.id)
        st.warning("Your answer could not be saved. Your progress on this card may be lost.")

    session = flashcards.record_answer_and_next(session, is_correct)
    st.session_state.study_session = session
    st.session_state.show_answer = False

    if flashcards.is_session_complete(session):
        st.session_state.show_results = True
        stats = flashcards.get_stats(session)
        logger.info("Session complete: %s", stats.as_dict())
        load_characters()


def end_session() -> None:
    """
    Discard the current session. Answers already saved are kept.
    """
    st.session_state.study_session = None
    st.session_state.show_results = False
    st.session_state.show_answer = False
