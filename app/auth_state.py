"""
Sign-in state for the Streamlit app.

Binds the accounts service to session_state: the signed-in user lives
in st.session_state.user for the lifetime of the browser session.
"""

from __future__ import annotations

import logging
from typing import Optional

import streamlit as st

from app.state import reset_user_state
from core import accounts, flashcards

logger = logging.getLogger(__name__)


def get_current_user() -> Optional[accounts.User]:
    """Signed-in user, or None."""
    return st.session_state.get("user")


def sign_up(email: str, password: str, name: str) -> tuple[accounts.User, int]:
    """
    Create an account, sign it in and adopt any orphaned characters.

    Returns:
        (user, number of characters migrated)
    """
    user = accounts.sign_up(email, password, name)
    st.session_state.user = user

    migrated = 0
    try:
        migrated = flashcards.migrate_orphaned_characters(user.id)
    except flashcards.StorageError:
        # Sign-up already succeeded; the rows stay orphaned until next time
        logger.error("Orphan migration failed for user %s", user.id)

    return user, migrated


def sign_in(email: str, password: str) -> accounts.User:
    """Sign in and remember the user in session_state."""
    user = accounts.sign_in(email, password)
    st.session_state.user = user
    return user


def sign_out() -> None:
    """Forget the signed-in user and any in-progress session."""
    user = get_current_user()
    if user is not None:
        logger.info("User signed out: %s", user.id)
    reset_user_state()


def update_profile(name: str) -> accounts.User:
    user = accounts.update_user(get_current_user().id, name=name)
    st.session_state.user = user
    return user


def update_password(new_password: str) -> None:
    accounts.update_user(get_current_user().id, password=new_password)


def delete_account() -> None:
    accounts.delete_user(get_current_user().id)
    reset_user_state()
