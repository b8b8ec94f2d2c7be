"""
Sign-in / sign-up page.
"""

from __future__ import annotations

import streamlit as st
from pydantic import ValidationError

from app import auth_state
from core import accounts, flashcards


def _show_validation_errors(exc: ValidationError) -> None:
    for field, message in flashcards.validation_messages(exc).items():
        st.error(f"{field.capitalize()}: {message}")


def render_auth_page() -> None:
    """
    Render the login and signup forms.
    """
    st.title("Shynese")
    login_tab, signup_tab = st.tabs(["Log In", "Get Started"])

    with login_tab:
        st.caption("Sign in to continue your Chinese learning journey")
        with st.form("login_form"):
            email = st.text_input("Email", placeholder="you@example.com")
            password = st.text_input("Password", type="password")
            if st.form_submit_button("Log In", type="primary", use_container_width=True):
                try:
                    auth_state.sign_in(email, password)
                except ValidationError as exc:
                    _show_validation_errors(exc)
                except accounts.InvalidCredentialsError:
                    st.error("Invalid email or password")
                except flashcards.StorageError:
                    st.error("Failed to log in")
                else:
                    st.rerun()

    with signup_tab:
        st.caption("Create an account to start learning Chinese")
        with st.form("signup_form"):
            name = st.text_input("Name", placeholder="Your name")
            email = st.text_input("Email", placeholder="you@example.com", key="signup_email")
            password = st.text_input("Password", type="password", key="signup_password")
            if st.form_submit_button("Create Account", type="primary", use_container_width=True):
                try:
                    _, migrated = auth_state.sign_up(email, password, name)
                except ValidationError as exc:
                    _show_validation_errors(exc)
                except accounts.AccountExistsError:
                    st.error("Email already registered")
                except flashcards.StorageError:
                    st.error("Failed to create account")
                else:
                    if migrated:
                        st.toast(f"Account created! {migrated} existing characters migrated.")
                    else:
                        st.toast("Account created successfully!")
                    st.rerun()
