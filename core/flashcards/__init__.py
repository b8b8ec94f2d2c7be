"""
Flashcards - study scheduling for Chinese characters

Main API for the flashcard app.

Pieces:
- Ordering policy: which characters to study next (score asc, attempts desc)
- Session state machine: cursor, tallies, progress and stats for one run
- Score-update rule: mastery counters after each answer
- Database: per-user character storage

Quick start:
    from core import flashcards

    # Initialize database
    flashcards.init_db()

    # Build a session (ordering happens in the query)
    items = flashcards.get_study_session(user_id, category="all")
    session = flashcards.create_session(items)

    # Answer the current card
    character = flashcards.get_current_character(session)
    flashcards.record_answer(user_id, character.id, is_correct=True)
    session = flashcards.record_answer_and_next(session, True)
"""

# Session state machine (pure logic)
from core.flashcards.session import (
    StudySession,
    SessionStats,
    create_session,
    get_current_character,
    record_answer_and_next,
    is_session_complete,
    get_progress,
    get_stats,
)

# Ordering policy and derivations (pure logic)
from core.flashcards.ordering import (
    order_study_items,
    derive_categories,
    count_by_category,
    filter_characters,
    is_unfiltered,
)

# Score-update rule (pure logic)
from core.flashcards.scoring import ScoreUpdate, apply_answer

# Database API
from core.flashcards.database import (
    init_db,
    reset_db,
    get_characters,
    get_character,
    get_study_session,
    get_categories,
    add_character,
    update_character,
    delete_character,
    record_answer,
    initialize_sample_data,
    migrate_orphaned_characters,
)

# Records, input models and errors
from core.flashcards.records import Character
from core.flashcards.schemas import CharacterInput, CharacterUpdate, validation_messages
from core.flashcards.errors import (
    FlashcardError,
    SessionCompleteError,
    StorageError,
    CharacterNotFoundError,
)
from core.flashcards.constants import (
    ALL_CATEGORIES,
    ALL_CATEGORIES_LABEL,
    UNFILTERED_SESSION_LIMIT,
)


__all__ = [
    # Session state machine
    "StudySession",
    "SessionStats",
    "create_session",
    "get_current_character",
    "record_answer_and_next",
    "is_session_complete",
    "get_progress",
    "get_stats",

    # Ordering
    "order_study_items",
    "derive_categories",
    "count_by_category",
    "filter_characters",
    "is_unfiltered",

    # Scoring
    "ScoreUpdate",
    "apply_answer",

    # Database operations
    "init_db",
    "reset_db",
    "get_characters",
    "get_character",
    "get_study_session",
    "get_categories",
    "add_character",
    "update_character",
    "delete_character",
    "record_answer",
    "initialize_sample_data",
    "migrate_orphaned_characters",

    # Records and input
    "Character",
    "CharacterInput",
    "CharacterUpdate",
    "validation_messages",

    # Errors
    "FlashcardError",
    "SessionCompleteError",
    "StorageError",
    "CharacterNotFoundError",

    # Constants
    "ALL_CATEGORIES",
    "ALL_CATEGORIES_LABEL",
    "UNFILTERED_SESSION_LIMIT",
]
