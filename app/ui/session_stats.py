"""
Session Statistics UI

Renders progress metrics and the end-of-session summary.
"""

import streamlit as st

from core import flashcards


def render_session_stats(session: flashcards.StudySession, category_label: str) -> None:
    """
    Render progress header and running tallies for an active session.
    """
    stats = flashcards.get_stats(session)

    col1, col2 = st.columns([3, 1])
    with col1:
        st.markdown(f"**Card {stats.completed} of {stats.total}**")
    with col2:
        st.caption(category_label)
    st.progress(flashcards.get_progress(session))

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Correct", stats.correct)
    with col2:
        st.metric("Incorrect", stats.incorrect)
    with col3:
        st.metric("Remaining", stats.remaining)


def render_session_complete(session: flashcards.StudySession) -> None:
    """Render session completion summary."""
    stats = flashcards.get_stats(session)

    st.success(f"🏆 Session complete! You reviewed {stats.completed} characters.")
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Correct", stats.correct)
    with col2:
        st.metric("Incorrect", stats.incorrect)
    with col3:
        st.metric("Accuracy", f"{stats.accuracy}%")
