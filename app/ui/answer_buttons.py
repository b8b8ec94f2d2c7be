"""
Answer Button UI

Renders the correct / incorrect buttons shown on the back of a card.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st


def render_answer_buttons(key_suffix: str = "") -> Optional[bool]:
    """
    Render answer buttons.

    Args:
        key_suffix: Makes widget keys unique per card

    Returns:
        True for correct, False for incorrect, None if nothing was clicked
    """
    st.markdown("**Did you know it?**")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("👎 Incorrect", key=f"incorrect_{key_suffix}", use_container_width=True):
            return False
    with col2:
        if st.button("👍 Correct", key=f"correct_{key_suffix}", type="primary", use_container_width=True):
            return True
    return None
