"""
Ordering Policy - Session Selection

Chooses which characters to study next and in what order.

Policy:
- Primary key: score ascending (least mastered first)
- Secondary key: attempts descending (remediation before novelty)
- Unfiltered sessions are truncated to UNFILTERED_SESSION_LIMIT
- Category sessions include every matching character

This is a greedy "practice what you know least" heuristic. It does not
look at last_reviewed and has no date-based intervals.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from core.flashcards.constants import ALL_CATEGORIES, UNFILTERED_SESSION_LIMIT
from core.flashcards.records import Character


def is_unfiltered(category: Optional[str]) -> bool:
    """True when the category selects the whole collection."""
    return not category or category == ALL_CATEGORIES


def session_sort_key(character: Character) -> tuple[int, int]:
    """Sort key: score ascending, then attempts descending."""
    return (character.score, -character.attempts)


def order_study_items(
    items: Iterable[Character],
    category: Optional[str] = None,
    limit: int = UNFILTERED_SESSION_LIMIT
) -> list[Character]:
    """
    Select and order characters for a study session.

    The sort is stable: characters with equal (score, attempts) keep the
    order they were given in (the collection's natural retrieval order,
    most recently created first).

    Args:
        items: Full collection in natural retrieval order
        category: Category to study, or None / "all" for every category
        limit: Maximum session length when no category is selected

    Returns:
        Ordered list of characters (possibly empty)
    """
    if is_unfiltered(category):
        return sorted(items, key=session_sort_key)[:limit]

    matching = [c for c in items if c.category == category]
    return sorted(matching, key=session_sort_key)


def derive_categories(items: Iterable[Character]) -> list[str]:
    """
    Unique categories across the collection, sorted lexicographically.

    Derived on every call from the live collection; never cached.
    """
    return sorted({c.category for c in items})


def count_by_category(items: Iterable[Character]) -> dict[str, int]:
    """Number of characters in each category."""
    return dict(Counter(c.category for c in items))


def filter_characters(
    items: Iterable[Character],
    category: Optional[str] = None,
    search_term: str = ""
) -> list[Character]:
    """
    Filter the collection for the management page.

    Applies the category filter (no truncation) and then a case-insensitive
    substring search over chinese, pinyin, english and category.
    """
    filtered = list(items)

    if not is_unfiltered(category):
        filtered = [c for c in filtered if c.category == category]

    term = (search_term or "").strip().lower()
    if term:
        filtered = [
            c for c in filtered
            if term in c.chinese.lower()
            or term in c.pinyin.lower()
            or term in c.english.lower()
            or term in c.category.lower()
        ]

    return filtered
