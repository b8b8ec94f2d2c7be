"""
Shynese - Chinese Character Flashcards

Streamlit entry point: page setup, database initialization, sign-in gate
and page tabs.

Run with:
    streamlit run app/streamlit_app.py
"""

import streamlit as st

from app import auth_state
from app.pages.auth import render_auth_page
from app.router import PAGES
from app.state import ensure_session_state, init_database, load_characters
from core import flashcards
from core.config import is_test_mode
from core.logging_setup import configure_logging


# ---- Page Setup ----

st.set_page_config(
    page_title="Shynese",
    page_icon="🀄",
    layout="centered"
)

configure_logging()


# ---- Database / Session State Initialization ----

init_database()
ensure_session_state()


def render_header() -> bool:
    """
    Render title bar with the signed-in user and logout button.

    Returns:
        True if logout was clicked
    """
    user = auth_state.get_current_user()
    col1, col2 = st.columns([4, 1])
    with col1:
        st.markdown("<style>.stApp h1 { font-size: 1.6rem; }</style>", unsafe_allow_html=True)
        st.title("🀄 Shynese")
        st.caption(f"👤 {user.name or user.email}")
    with col2:
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("Logout", use_container_width=True):
            return True
    if is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test_shynese (set TEST_MODE=false in .env for production)")
    return False


def _on_sign_in() -> None:
    """Load the user's collection, seeding samples into an empty one."""
    user = auth_state.get_current_user()
    try:
        flashcards.initialize_sample_data(user.id)
    except flashcards.StorageError:
        st.error("Failed to initialize sample characters.")
    load_characters()


# ---- Main App ----

def main():
    """Main app entry point."""
    user = auth_state.get_current_user()
    if user is None:
        render_auth_page()
        return

    if st.session_state.get("loaded_user_id") != user.id:
        _on_sign_in()
        st.session_state.loaded_user_id = user.id

    if render_header():
        auth_state.sign_out()
        st.session_state.loaded_user_id = None
        st.rerun()

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
