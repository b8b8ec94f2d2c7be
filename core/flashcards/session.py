"""
Study Session - State Machine

Tracks one study run over an ordered snapshot of characters.

States:
- Active:   current_index < total_cards
- Complete: current_index == total_cards

Sessions are immutable values: each answer returns a new session. Nothing
here touches the database; the caller persists per-answer score changes.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from core.flashcards.errors import SessionCompleteError
from core.flashcards.records import Character


@dataclass(frozen=True)
class StudySession:
    """
    Ordered working set plus cursor and tallies for one study run.
    """
    characters: tuple[Character, ...]
    current_index: int = 0
    correct_answers: int = 0
    incorrect_answers: int = 0

    @property
    def total_cards(self) -> int:
        return len(self.characters)


@dataclass(frozen=True)
class SessionStats:
    """
    Summary statistics for a session.
    """
    total: int
    completed: int
    correct: int
    incorrect: int
    accuracy: int
    remaining: int

    def as_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "completed": self.completed,
            "correct": self.correct,
            "incorrect": self.incorrect,
            "accuracy": self.accuracy,
            "remaining": self.remaining,
        }


def _percent(numerator: int, denominator: int) -> int:
    """
    Whole-number percentage, rounding halves up; 0 for an empty denominator.
    """
    if denominator == 0:
        return 0
    return math.floor(numerator / denominator * 100 + 0.5)


def create_session(items: Iterable[Character]) -> StudySession:
    """
    Start a session from an ordered list of characters.

    The list is copied so later changes to the caller's collection cannot
    affect the session.

    Args:
        items: Ordered characters to study (may be empty)

    Returns:
        New session at position 0

    Raises:
        TypeError: If items is not a sequence of Character
    """
    if items is None or isinstance(items, (str, bytes, Mapping)):
        raise TypeError(f"Expected a sequence of characters, got {type(items).__name__}")

    try:
        snapshot = tuple(items)
    except TypeError as exc:
        raise TypeError(f"Expected a sequence of characters, got {type(items).__name__}") from exc

    for item in snapshot:
        if not isinstance(item, Character):
            raise TypeError(f"Session items must be Character, got {type(item).__name__}")

    return StudySession(characters=snapshot)


def get_current_character(session: StudySession) -> Optional[Character]:
    """
    Character at the cursor, or None once the session is complete.
    """
    if session.current_index >= session.total_cards:
        return None
    return session.characters[session.current_index]


def is_session_complete(session: StudySession) -> bool:
    """Check if every card has been answered."""
    return session.current_index >= session.total_cards


def record_answer_and_next(session: StudySession, is_correct: bool) -> StudySession:
    """
    Record an answer for the current card and advance the cursor.

    Raises:
        SessionCompleteError: If the session has no current card
    """
    if is_session_complete(session):
        raise SessionCompleteError(
            f"Session already complete ({session.current_index}/{session.total_cards}); "
            "check is_session_complete() before recording an answer"
        )

    if is_correct:
        return replace(
            session,
            current_index=session.current_index + 1,
            correct_answers=session.correct_answers + 1,
        )
    return replace(
        session,
        current_index=session.current_index + 1,
        incorrect_answers=session.incorrect_answers + 1,
    )


def get_progress(session: StudySession) -> int:
    """
    Session progress as a whole percentage (0 for an empty session).
    """
    return _percent(session.current_index, session.total_cards)


def get_stats(session: StudySession) -> SessionStats:
    """
    Summary statistics; accuracy is 0 until an answer has been recorded.
    """
    answered = session.correct_answers + session.incorrect_answers
    return SessionStats(
        total=session.total_cards,
        completed=session.current_index,
        correct=session.correct_answers,
        incorrect=session.incorrect_answers,
        accuracy=_percent(session.correct_answers, answered),
        remaining=session.total_cards - session.current_index,
    )
