"""
Tests for the study session state machine.
"""

import pytest

from core.flashcards import session as study
from core.flashcards.errors import SessionCompleteError


def test_empty_session_is_complete_immediately():
    session = study.create_session([])

    assert session.total_cards == 0
    assert study.is_session_complete(session)
    assert study.get_current_character(session) is None
    assert study.get_progress(session) == 0
    assert study.get_stats(session).as_dict() == {
        "total": 0,
        "completed": 0,
        "correct": 0,
        "incorrect": 0,
        "accuracy": 0,
        "remaining": 0,
    }


def test_new_session_starts_at_first_card(make_character):
    items = [make_character(id="A"), make_character(id="B")]
    session = study.create_session(items)

    assert session.current_index == 0
    assert session.correct_answers == 0
    assert session.incorrect_answers == 0
    assert study.get_current_character(session).id == "A"
    assert study.get_progress(session) == 0
    assert study.get_stats(session).accuracy == 0


def test_session_is_a_snapshot(make_character):
    items = [make_character(id="A"), make_character(id="B")]
    session = study.create_session(items)

    items.pop(0)
    items.append(make_character(id="C"))

    assert session.total_cards == 2
    assert [c.id for c in session.characters] == ["A", "B"]


def test_record_answer_returns_new_session(make_character):
    session = study.create_session([make_character(id="A"), make_character(id="B")])

    after = study.record_answer_and_next(session, True)

    assert session.current_index == 0
    assert after.current_index == 1
    assert after.correct_answers == 1
    assert after.incorrect_answers == 0
    assert study.get_current_character(after).id == "B"

    after = study.record_answer_and_next(after, False)
    assert after.correct_answers == 1
    assert after.incorrect_answers == 1


def test_full_run_completes_with_consistent_stats(make_character):
    answers = [True, False, True, True, False, True, False]
    session = study.create_session([make_character() for _ in answers])

    for answer in answers:
        assert not study.is_session_complete(session)
        assert study.get_current_character(session) is not None
        session = study.record_answer_and_next(session, answer)
        stats = study.get_stats(session)
        assert stats.correct + stats.incorrect == session.current_index
        assert 0 <= study.get_progress(session) <= 100

    stats = study.get_stats(session)
    assert study.is_session_complete(session)
    assert study.get_current_character(session) is None
    assert stats.completed == stats.total == 7
    assert stats.remaining == 0
    assert stats.correct == 4
    assert stats.incorrect == 3
    assert stats.accuracy == 57
    assert study.get_progress(session) == 100


def test_progress_tracks_cursor(make_character):
    session = study.create_session([make_character() for _ in range(4)])
    seen = [study.get_progress(session)]

    while not study.is_session_complete(session):
        session = study.record_answer_and_next(session, True)
        seen.append(study.get_progress(session))

    assert seen == [0, 25, 50, 75, 100]


def test_percentages_round_half_up(make_character):
    session = study.create_session([make_character() for _ in range(8)])
    session = study.record_answer_and_next(session, True)

    assert study.get_progress(session) == 13  # 12.5%

    session = study.create_session([make_character() for _ in range(3)])
    session = study.record_answer_and_next(session, True)
    session = study.record_answer_and_next(session, True)
    session = study.record_answer_and_next(session, False)

    assert study.get_stats(session).accuracy == 67


def test_answering_complete_session_raises(make_character):
    session = study.create_session([make_character()])
    session = study.record_answer_and_next(session, True)

    with pytest.raises(SessionCompleteError):
        study.record_answer_and_next(session, True)

    with pytest.raises(SessionCompleteError):
        study.record_answer_and_next(study.create_session([]), False)


@pytest.mark.parametrize("bad_items", [None, "abc", {"a": 1}, 42, [1, 2]])
def test_create_session_rejects_non_sequences(bad_items):
    with pytest.raises(TypeError):
        study.create_session(bad_items)


def test_create_session_accepts_generators(make_character):
    session = study.create_session(make_character() for _ in range(3))

    assert session.total_cards == 3
