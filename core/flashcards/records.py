"""
Character Records

The typed public shape of a flashcard and the pure mapping functions
between it and the storage row.

Public field names and storage columns happen to share snake_case names;
the mapping is still kept explicit so the storage schema can drift
(e.g. timestamps stored as strings) without touching the core logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional


# Public fields that a caller may change through an update
EDITABLE_FIELDS = ("chinese", "pinyin", "english", "category")


@dataclass(frozen=True)
class Character:
    """
    A single flashcard with its practice-tracking state.
    """
    id: str
    chinese: str
    pinyin: str
    english: str
    category: str

    # Mastery tracking (mutated only by the score-update rule)
    score: int = 0
    attempts: int = 0
    correct_count: int = 0
    last_reviewed: Optional[datetime] = None

    created_at: Optional[datetime] = None


def _as_aware_datetime(value: Any) -> Optional[datetime]:
    """
    Normalize a stored timestamp (datetime or ISO string) to an aware UTC datetime.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        # SQLite drops tzinfo; stored values are always UTC
        value = value.replace(tzinfo=timezone.utc)
    return value


def character_from_row(row: Any) -> Character:
    """
    Map a storage row (ORM instance or mapping) to a Character.

    Args:
        row: Object or mapping exposing the characters table columns

    Returns:
        Character record
    """
    if isinstance(row, Mapping):
        get = row.get
    else:
        def get(name, default=None):
            return getattr(row, name, default)

    return Character(
        id=str(get("id")),
        chinese=get("chinese"),
        pinyin=get("pinyin"),
        english=get("english"),
        category=get("category"),
        score=int(get("score") or 0),
        attempts=int(get("attempts") or 0),
        correct_count=int(get("correct_count") or 0),
        last_reviewed=_as_aware_datetime(get("last_reviewed")),
        created_at=_as_aware_datetime(get("created_at")),
    )


def update_columns(updates: Mapping[str, Any]) -> dict[str, Any]:
    """
    Map a partial public update to storage column values.

    Unknown keys and keys whose value is None are dropped, so a sparse
    update only touches the columns that were supplied. Mastery counters
    are never mapped here; only the score-update rule writes them.

    Args:
        updates: Partial Character fields

    Returns:
        Column name -> value for the characters table
    """
    columns: dict[str, Any] = {}
    for field in EDITABLE_FIELDS:
        value = updates.get(field)
        if value is None:
            continue
        columns[field] = value
    return columns
