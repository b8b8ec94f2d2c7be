"""
Database - Flashcard Persistence

Handles all database operations for characters.
Uses SQLAlchemy ORM; any SQLAlchemy URL works (Postgres in production,
SQLite for local runs and tests).

This module handles ONLY database I/O. Ordering and scoring rules live
in the ordering and scoring modules and are applied here.

Every function takes the owning user_id and filters on it, so one
user can never read or change another user's characters.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from typing import Iterator, Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import get_database_url
from core.flashcards import ordering, scoring
from core.flashcards.constants import SAMPLE_CHARACTERS, UNFILTERED_SESSION_LIMIT
from core.flashcards.errors import CharacterNotFoundError, StorageError
from core.flashcards.models import Base, Character as CharacterModel
from core.flashcards.records import Character, character_from_row, update_columns
from core.flashcards.schemas import CharacterInput, CharacterUpdate

logger = logging.getLogger(__name__)

# Engine shared across requests (created lazily)
_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


# ---- Connection Management ----

def _build_engine(db_url: str) -> Engine:
    if db_url.startswith("sqlite"):
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection so every session sees the same in-memory db
            return create_engine(
                db_url,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        return create_engine(db_url, connect_args={"check_same_thread": False})

    return create_engine(
        db_url,
        pool_size=5,           # Keep 5 connections open
        max_overflow=10,       # Allow up to 10 extra connections
        pool_pre_ping=True,    # Verify connections before use
        echo=False
    )


def get_engine() -> Engine:
    """
    Get the SQLAlchemy engine, creating it from DATABASE_URL on first use.

    Returns:
        SQLAlchemy Engine instance
    """
    global _engine, _session_factory
    if _engine is None:
        _engine = _build_engine(get_database_url())
        _session_factory = sessionmaker(bind=_engine, expire_on_commit=False)
    return _engine


def set_engine(engine: Optional[Engine]) -> None:
    """
    Replace the shared engine (used by tests and scripts).

    Passing None drops the cached engine so the next call rebuilds it
    from the environment.
    """
    global _engine, _session_factory
    _engine = engine
    _session_factory = (
        sessionmaker(bind=engine, expire_on_commit=False) if engine is not None else None
    )


def get_session() -> Session:
    """
    Get a SQLAlchemy session for database operations.

    Returns:
        SQLAlchemy Session instance
    """
    get_engine()
    return _session_factory()


@contextmanager
def _session_scope(action: str) -> Iterator[Session]:
    """
    Open a session, converting SQLAlchemy failures into StorageError.

    Args:
        action: Short description used in the log message and error
    """
    session = get_session()
    try:
        yield session
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Error %s: %s", action, exc, exc_info=True)
        raise StorageError(f"Error {action}") from exc
    finally:
        session.close()


def init_db() -> None:
    """
    Initialize database schema if tables don't exist.

    Safe to call multiple times - only creates missing tables.
    """
    engine = get_engine()
    inspector = inspect(engine)
    existing_tables = inspector.get_table_names()

    if 'users' not in existing_tables or 'characters' not in existing_tables:
        Base.metadata.create_all(engine)
        logger.info("Created flashcard tables")
        return

    character_columns = {col["name"] for col in inspector.get_columns("characters")}
    if "user_id" not in character_columns:
        raise RuntimeError(
            "characters table is missing the user_id column. "
            "Please migrate the database to the per-user schema."
        )


def reset_db() -> None:
    """
    DANGEROUS: Delete all data and recreate tables.

    Only use this for testing or when you want to start fresh.
    All characters and accounts will be lost!
    """
    engine = get_engine()
    Base.metadata.drop_all(engine)
    logger.warning("All tables dropped")

    init_db()


# ---- Queries ----

def _get_owned(session: Session, user_id: str, character_id: str) -> CharacterModel:
    db_character = session.query(CharacterModel).filter(
        CharacterModel.id == character_id,
        CharacterModel.user_id == user_id
    ).first()
    if db_character is None:
        raise CharacterNotFoundError(character_id)
    return db_character


def get_characters(user_id: str) -> list[Character]:
    """
    Get all of a user's characters, most recently created first.

    Rows created at the same instant fall back to id order so the
    result is the same on every backend.

    Args:
        user_id: Owning user

    Returns:
        List of Character records
    """
    with _session_scope("fetching characters") as session:
        rows = session.query(CharacterModel).filter(
            CharacterModel.user_id == user_id
        ).order_by(CharacterModel.created_at.desc(), CharacterModel.id.desc()).all()
        return [character_from_row(row) for row in rows]


def get_character(user_id: str, character_id: str) -> Character:
    """
    Get one character.

    Raises:
        CharacterNotFoundError: If the user has no such character
    """
    with _session_scope("fetching character") as session:
        return character_from_row(_get_owned(session, user_id, character_id))


def get_study_session(
    user_id: str,
    category: Optional[str] = None,
    limit: int = UNFILTERED_SESSION_LIMIT
) -> list[Character]:
    """
    Get the ordered characters for a new study session.

    Args:
        user_id: Owning user
        category: Category to study, or None / "all" for a mixed session
        limit: Session size when no category is selected

    Returns:
        Characters ordered by score asc, attempts desc
    """
    return ordering.order_study_items(get_characters(user_id), category, limit)


def get_categories(user_id: str) -> list[str]:
    """
    Get all unique categories of a user's characters, sorted.
    """
    return ordering.derive_categories(get_characters(user_id))


# ---- Writes ----

def add_character(user_id: str, data: CharacterInput) -> Character:
    """
    Add a new character with fresh mastery counters.

    Args:
        user_id: Owning user
        data: Validated card content

    Returns:
        The stored Character
    """
    now = datetime.now(timezone.utc)
    with _session_scope("adding character") as session:
        db_character = CharacterModel(
            user_id=user_id,
            chinese=data.chinese,
            pinyin=data.pinyin,
            english=data.english,
            category=data.category,
            score=0,
            attempts=0,
            correct_count=0,
            last_reviewed=now,
            created_at=now,
        )
        session.add(db_character)
        session.commit()
        return character_from_row(db_character)


def update_character(
    user_id: str,
    character_id: str,
    updates: CharacterUpdate | CharacterInput
) -> Character:
    """
    Update a character's content. Only supplied fields change.

    Raises:
        CharacterNotFoundError: If the user has no such character
    """
    columns = update_columns(updates.model_dump())
    with _session_scope("updating character") as session:
        db_character = _get_owned(session, user_id, character_id)
        for name, value in columns.items():
            setattr(db_character, name, value)
        session.commit()
        return character_from_row(db_character)


def delete_character(user_id: str, character_id: str) -> None:
    """
    Delete a character.

    Raises:
        CharacterNotFoundError: If the user has no such character
    """
    with _session_scope("deleting character") as session:
        db_character = _get_owned(session, user_id, character_id)
        session.delete(db_character)
        session.commit()


def record_answer(
    user_id: str,
    character_id: str,
    is_correct: bool,
    answered_at: Optional[datetime] = None
) -> Character:
    """
    Apply one answer to a character's mastery counters.

    Reads the current counters and writes the result of the score-update
    rule in the same transaction. Not idempotent: retrying after a timeout
    can apply the answer twice.

    Args:
        user_id: Owning user
        character_id: Answered character
        is_correct: Whether the answer was correct
        answered_at: Answer time (defaults to now)

    Returns:
        The updated Character

    Raises:
        CharacterNotFoundError: If the user has no such character
        StorageError: If the write fails
    """
    with _session_scope("recording answer") as session:
        db_character = _get_owned(session, user_id, character_id)
        update = scoring.apply_answer(db_character, is_correct, answered_at)
        for name, value in update.as_columns().items():
            setattr(db_character, name, value)
        session.commit()
        return character_from_row(db_character)


def initialize_sample_data(user_id: str) -> int:
    """
    Seed a user's empty collection with the sample characters.

    Returns:
        Number of characters inserted (0 if the collection was not empty)
    """
    with _session_scope("initializing sample data") as session:
        has_characters = session.query(CharacterModel.id).filter(
            CharacterModel.user_id == user_id
        ).first() is not None
        if has_characters:
            return 0

        now = datetime.now(timezone.utc)
        # One tick apart so the last sample is the newest, as if added one by one
        for i, sample in enumerate(SAMPLE_CHARACTERS):
            created_at = now + timedelta(microseconds=i)
            session.add(CharacterModel(
                user_id=user_id,
                score=0,
                attempts=0,
                correct_count=0,
                last_reviewed=created_at,
                created_at=created_at,
                **sample
            ))
        session.commit()

    logger.info("Seeded %d sample characters for user %s", len(SAMPLE_CHARACTERS), user_id)
    return len(SAMPLE_CHARACTERS)


def migrate_orphaned_characters(target_user_id: str) -> int:
    """
    Assign every character without an owner to target_user_id.

    Args:
        target_user_id: User receiving the orphaned rows

    Returns:
        Number of characters migrated
    """
    if not target_user_id:
        raise ValueError("target_user_id is required")

    with _session_scope("migrating orphaned characters") as session:
        migrated = session.query(CharacterModel).filter(
            CharacterModel.user_id.is_(None)
        ).update({CharacterModel.user_id: target_user_id}, synchronize_session=False)
        session.commit()

    if migrated:
        logger.info("Migrated %d orphaned characters to user %s", migrated, target_user_id)
    return migrated or 0
