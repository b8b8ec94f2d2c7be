"""
Category filter UI.
"""

from __future__ import annotations

import streamlit as st

from core.flashcards.constants import ALL_CATEGORIES, ALL_CATEGORIES_LABEL


def render_category_filter(
    categories: list[str],
    counts: dict[str, int],
    selected: str = ALL_CATEGORIES,
    key: str = "category_filter",
) -> str:
    """
    Render a category select box with per-category counts.

    Returns:
        Selected category, or ALL_CATEGORIES
    """
    total = sum(counts.values())
    options = [ALL_CATEGORIES] + list(categories)
    labels = {ALL_CATEGORIES: f"{ALL_CATEGORIES_LABEL} ({total})"}
    labels.update({c: f"{c} ({counts.get(c, 0)})" for c in categories})

    index = options.index(selected) if selected in options else 0
    return st.selectbox(
        "Category",
        options,
        index=index,
        format_func=lambda option: labels[option],
        key=key,
    )
