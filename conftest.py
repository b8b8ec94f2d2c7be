"""
Shared pytest fixtures.
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from core.flashcards import database
from core.flashcards.records import Character


@pytest.fixture
def db():
    """
    Point the data-access layer at a fresh in-memory SQLite database.
    """
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    database.set_engine(engine)
    database.init_db()
    yield engine
    database.set_engine(None)
    engine.dispose()


@pytest.fixture
def make_character():
    """
    Factory for Character records with sensible defaults.
    """
    base_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _make(id=None, score=0, attempts=0, correct_count=0, category="Greetings", **kwargs):
        counter["n"] += 1
        n = counter["n"]
        return Character(
            id=id or f"char-{n}",
            chinese=kwargs.pop("chinese", f"字{n}"),
            pinyin=kwargs.pop("pinyin", f"zi{n}"),
            english=kwargs.pop("english", f"word {n}"),
            category=category,
            score=score,
            attempts=attempts,
            correct_count=correct_count,
            last_reviewed=kwargs.pop("last_reviewed", base_time),
            created_at=kwargs.pop("created_at", base_time + timedelta(minutes=n)),
        )

    return _make
