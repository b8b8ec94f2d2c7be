"""
Account settings page.
"""

from __future__ import annotations

import streamlit as st

from app import auth_state
from core import accounts, flashcards


def render_account_page() -> None:
    """
    Render profile, password and account deletion controls.
    """
    user = auth_state.get_current_user()

    st.subheader("Account")
    st.caption(f"Signed in as {user.email}")

    with st.form("profile_form"):
        name = st.text_input("Name", value=user.name)
        if st.form_submit_button("Update Profile"):
            try:
                auth_state.update_profile(name)
            except ValueError as exc:
                st.error(str(exc))
            except (accounts.AccountError, flashcards.StorageError):
                st.error("Failed to update profile.")
            else:
                st.success("Profile updated.")

    with st.form("password_form", clear_on_submit=True):
        new_password = st.text_input("New Password", type="password")
        confirm_password = st.text_input("Confirm Password", type="password")
        if st.form_submit_button("Change Password"):
            if new_password != confirm_password:
                st.error("Passwords do not match.")
            else:
                try:
                    auth_state.update_password(new_password)
                except ValueError as exc:
                    st.error(str(exc))
                except (accounts.AccountError, flashcards.StorageError):
                    st.error("Failed to change password.")
                else:
                    st.success("Password changed.")

    st.markdown("### Danger Zone")
    confirm = st.checkbox("I understand this deletes my account and all my characters")
    if st.button("Delete Account", disabled=not confirm):
        try:
            auth_state.delete_account()
        except (accounts.AccountError, flashcards.StorageError):
            st.error("Failed to delete account.")
        else:
            st.rerun()
