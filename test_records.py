"""
Tests for record mapping and form validation.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from core.flashcards.records import character_from_row, update_columns
from core.flashcards.schemas import CharacterInput, CharacterUpdate, validation_messages


def test_character_from_mapping_row():
    row = {
        "id": 42,
        "chinese": "水",
        "pinyin": "shuǐ",
        "english": "water",
        "category": "Nature",
        "score": 3,
        "attempts": 5,
        "correct_count": 4,
        "last_reviewed": "2024-05-01T10:00:00+00:00",
        "created_at": "2024-04-01T09:00:00",
    }

    character = character_from_row(row)

    assert character.id == "42"
    assert character.chinese == "水"
    assert (character.score, character.attempts, character.correct_count) == (3, 5, 4)
    assert character.last_reviewed == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)
    # Naive timestamps are read as UTC
    assert character.created_at == datetime(2024, 4, 1, 9, tzinfo=timezone.utc)


def test_character_from_row_defaults_missing_counters():
    character = character_from_row({
        "id": "x", "chinese": "火", "pinyin": "huǒ", "english": "fire", "category": "Nature",
        "score": None, "attempts": None, "correct_count": None,
    })

    assert (character.score, character.attempts, character.correct_count) == (0, 0, 0)
    assert character.last_reviewed is None


def test_update_columns_is_sparse():
    columns = update_columns({"english": "hi", "pinyin": None, "unknown": "x"})

    assert columns == {"english": "hi"}


def test_update_columns_never_touches_mastery_counters():
    columns = update_columns({
        "category": "Food",
        "score": 9,
        "attempts": 9,
        "correct_count": 9,
        "last_reviewed": "2024-01-01T00:00:00+00:00",
    })

    assert columns == {"category": "Food"}


def test_character_input_strips_whitespace():
    data = CharacterInput(chinese=" 你好 ", pinyin="nǐ hǎo ", english=" hello", category="Greetings")

    assert data.chinese == "你好"
    assert data.pinyin == "nǐ hǎo"
    assert data.english == "hello"


def test_character_input_requires_every_field():
    with pytest.raises(ValidationError) as excinfo:
        CharacterInput(chinese="  ", pinyin="", english="hello", category=None)

    messages = validation_messages(excinfo.value)
    assert messages == {
        "chinese": "Chinese character is required",
        "pinyin": "Pinyin is required",
        "category": "Category is required",
    }


def test_character_update_leaves_omitted_fields_none():
    update = CharacterUpdate(english=" thanks ")

    assert update.english == "thanks"
    assert update_columns(update.model_dump()) == {"english": "thanks"}


def test_character_update_rejects_blank_values():
    with pytest.raises(ValidationError):
        CharacterUpdate(category="   ")
