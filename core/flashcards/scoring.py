"""
Score-Update Rule

Pure update of a character's mastery counters after one answer.

Rule:
- attempts += 1
- correct:   correct_count += 1, score += 1
- incorrect: score = max(0, score - 1), correct_count unchanged
- last_reviewed = time of the answer

The persistence layer applies this exactly once per recorded answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Protocol


class ProgressState(Protocol):
    score: int
    attempts: int
    correct_count: int


@dataclass(frozen=True)
class ScoreUpdate:
    """
    Counter values after an answer, ready to write back to storage.
    """
    score: int
    attempts: int
    correct_count: int
    last_reviewed: datetime

    def as_columns(self) -> dict:
        return {
            "score": self.score,
            "attempts": self.attempts,
            "correct_count": self.correct_count,
            "last_reviewed": self.last_reviewed,
        }


def apply_answer(
    progress: ProgressState,
    is_correct: bool,
    answered_at: Optional[datetime] = None
) -> ScoreUpdate:
    """
    Compute the counters that result from one answer.

    Args:
        progress: Current score / attempts / correct_count
        is_correct: Whether the answer was correct
        answered_at: Answer timestamp (defaults to now, UTC)

    Returns:
        ScoreUpdate with the new values
    """
    if answered_at is None:
        answered_at = datetime.now(timezone.utc)

    if is_correct:
        score = progress.score + 1
        correct_count = progress.correct_count + 1
    else:
        score = max(0, progress.score - 1)
        correct_count = progress.correct_count

    return ScoreUpdate(
        score=score,
        attempts=progress.attempts + 1,
        correct_count=correct_count,
        last_reviewed=answered_at,
    )
