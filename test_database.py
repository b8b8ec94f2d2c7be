"""
Tests for the character data-access layer against in-memory SQLite.
"""

from datetime import datetime, timedelta, timezone

import pytest

from core.flashcards import database
from core.flashcards.constants import SAMPLE_CHARACTERS
from core.flashcards.errors import CharacterNotFoundError, StorageError
from core.flashcards.models import Base, Character as CharacterModel
from core.flashcards.schemas import CharacterInput, CharacterUpdate

USER = "user-a"
OTHER_USER = "user-b"
BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _insert(user_id, minutes, **fields):
    """Insert a row directly with an explicit creation time."""
    values = {
        "chinese": "字",
        "pinyin": "zì",
        "english": "character",
        "category": "Greetings",
        "score": 0,
        "attempts": 0,
        "correct_count": 0,
    }
    values.update(fields)
    session = database.get_session()
    try:
        row = CharacterModel(
            user_id=user_id,
            created_at=BASE_TIME + timedelta(minutes=minutes),
            last_reviewed=BASE_TIME,
            **values
        )
        session.add(row)
        session.commit()
        return row.id
    finally:
        session.close()


def _hello():
    return CharacterInput(chinese="你好", pinyin="nǐ hǎo", english="hello", category="Greetings")


def test_add_character_starts_with_fresh_counters(db):
    character = database.add_character(USER, _hello())

    assert character.id
    assert character.chinese == "你好"
    assert (character.score, character.attempts, character.correct_count) == (0, 0, 0)
    assert character.created_at is not None
    assert database.get_character(USER, character.id) == character


def test_get_characters_newest_first(db):
    oldest = _insert(USER, 1)
    newest = _insert(USER, 3)
    middle = _insert(USER, 2)

    assert [c.id for c in database.get_characters(USER)] == [newest, middle, oldest]


def test_queries_are_scoped_to_owner(db):
    mine = database.add_character(USER, _hello())
    theirs = database.add_character(OTHER_USER, _hello())

    assert [c.id for c in database.get_characters(USER)] == [mine.id]
    with pytest.raises(CharacterNotFoundError):
        database.get_character(USER, theirs.id)
    with pytest.raises(CharacterNotFoundError):
        database.update_character(USER, theirs.id, CharacterUpdate(english="hi"))
    with pytest.raises(CharacterNotFoundError):
        database.delete_character(USER, theirs.id)
    with pytest.raises(CharacterNotFoundError):
        database.record_answer(USER, theirs.id, True)

    assert database.get_character(OTHER_USER, theirs.id).attempts == 0


def test_update_character_changes_only_given_fields(db):
    character = database.add_character(USER, _hello())

    updated = database.update_character(USER, character.id, CharacterUpdate(english="hi"))

    assert updated.english == "hi"
    assert updated.chinese == "你好"
    assert updated.category == "Greetings"
    assert database.get_character(USER, character.id).english == "hi"


def test_delete_character(db):
    character = database.add_character(USER, _hello())

    database.delete_character(USER, character.id)

    assert database.get_characters(USER) == []
    with pytest.raises(CharacterNotFoundError) as excinfo:
        database.get_character(USER, character.id)
    assert excinfo.value.character_id == character.id


def test_record_answer_persists_score_rule(db):
    character = database.add_character(USER, _hello())
    answered_at = datetime(2025, 6, 1, 8, tzinfo=timezone.utc)

    database.record_answer(USER, character.id, True)
    result = database.record_answer(USER, character.id, False, answered_at)

    assert (result.score, result.attempts, result.correct_count) == (0, 2, 1)
    assert result.last_reviewed == answered_at

    stored = database.get_character(USER, character.id)
    assert (stored.score, stored.attempts, stored.correct_count) == (0, 2, 1)


def test_record_answer_never_goes_negative(db):
    character = database.add_character(USER, _hello())

    for _ in range(3):
        result = database.record_answer(USER, character.id, False)

    assert (result.score, result.attempts, result.correct_count) == (0, 3, 0)


def test_study_session_orders_and_limits(db):
    for i in range(12):
        _insert(USER, i, score=i % 3, attempts=i)

    session_items = database.get_study_session(USER)

    assert len(session_items) == 10
    keys = [(c.score, -c.attempts) for c in session_items]
    assert keys == sorted(keys)


def test_study_session_category_is_unbounded(db):
    for i in range(12):
        _insert(USER, i, category="Numbers")
    _insert(USER, 20, category="Nature")
    _insert(OTHER_USER, 21, category="Numbers")

    session_items = database.get_study_session(USER, "Numbers")

    assert len(session_items) == 12
    assert {c.category for c in session_items} == {"Numbers"}


def test_study_session_ties_prefer_newest(db):
    older = _insert(USER, 1, score=1, attempts=1)
    newer = _insert(USER, 2, score=1, attempts=1)

    assert [c.id for c in database.get_study_session(USER, "all")] == [newer, older]


def test_get_categories_sorted_and_unique(db):
    _insert(USER, 1, category="Numbers")
    _insert(USER, 2, category="Greetings")
    _insert(USER, 3, category="Numbers")
    _insert(OTHER_USER, 4, category="Food")

    assert database.get_categories(USER) == ["Greetings", "Numbers"]
    assert database.get_categories("nobody") == []


def test_initialize_sample_data_only_for_empty_collection(db):
    assert database.initialize_sample_data(USER) == len(SAMPLE_CHARACTERS) == 7
    assert database.initialize_sample_data(USER) == 0

    characters = database.get_characters(USER)
    assert len(characters) == 7
    assert database.get_categories(USER) == ["Greetings", "Nature", "Numbers"]
    assert all(c.score == 0 and c.attempts == 0 for c in characters)


def test_sample_data_has_distinct_creation_times(db):
    database.initialize_sample_data(USER)

    characters = database.get_characters(USER)

    assert len({c.created_at for c in characters}) == len(SAMPLE_CHARACTERS)
    # Last sample inserted is the newest
    assert [c.chinese for c in characters] == [s["chinese"] for s in reversed(SAMPLE_CHARACTERS)]
    assert [c.chinese for c in database.get_study_session(USER)] == [
        s["chinese"] for s in reversed(SAMPLE_CHARACTERS)
    ]


def test_same_creation_time_falls_back_to_id_order(db):
    ids = [_insert(USER, 5) for _ in range(4)]

    assert [c.id for c in database.get_characters(USER)] == sorted(ids, reverse=True)


def test_migrate_orphaned_characters(db):
    _insert(None, 1)
    _insert(None, 2, category="Nature")
    _insert(OTHER_USER, 3)

    assert database.migrate_orphaned_characters(USER) == 2
    assert len(database.get_characters(USER)) == 2
    assert len(database.get_characters(OTHER_USER)) == 1
    assert database.migrate_orphaned_characters(OTHER_USER) == 0


def test_migrate_requires_target_user(db):
    with pytest.raises(ValueError):
        database.migrate_orphaned_characters("")


def test_storage_failures_raise_storage_error(db):
    Base.metadata.drop_all(db)

    with pytest.raises(StorageError):
        database.get_characters(USER)
    with pytest.raises(StorageError):
        database.add_character(USER, _hello())


def test_init_db_is_idempotent(db):
    character = database.add_character(USER, _hello())

    database.init_db()

    assert database.get_character(USER, character.id) == character
