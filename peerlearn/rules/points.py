"""Session points.

A session's creator earns base points for the size of the audience, one point
for finishing the session, and bonus points driven by the feedback received::

    attendees   0  1  2  3  4  5  6  7  8+
    points      0  2  3  4  5  6  7  8  10

    +1  session completed
    +3  mean rating >= 4.5
    +1  per feedback with behaviour "Good"
"""
from __future__ import annotations

from typing import Any, Iterable, Sequence

from .types import Behavior, PointsAward, SessionStatus

# (minimum attendees, points), highest first
ATTENDEE_STEPS: tuple[tuple[int, int], ...] = (
    (8, 10),
    (7, 8),
    (6, 7),
    (5, 6),
    (4, 5),
    (3, 4),
    (2, 3),
    (1, 2),
)
COMPLETION_POINTS = 1
HIGH_RATING_THRESHOLD = 4.5
HIGH_RATING_BONUS = 3
GOOD_BEHAVIOR_BONUS = 1


def attendee_points(attendee_count: int) -> int:
    for minimum, points in ATTENDEE_STEPS:
        if attendee_count >= minimum:
            return points
    return 0


def base_points(session: Any) -> int:
    """Points for audience size, plus one when the session is completed."""
    points = attendee_points(len(session.attendees or ()))
    if session.status == SessionStatus.COMPLETED:
        points += COMPLETION_POINTS
    return points


def bonus_points(feedback_list: Sequence[Any]) -> int:
    if not feedback_list:
        return 0

    bonus = 0
    mean = sum(f.rating for f in feedback_list) / len(feedback_list)
    if mean >= HIGH_RATING_THRESHOLD:
        bonus += HIGH_RATING_BONUS

    bonus += GOOD_BEHAVIOR_BONUS * sum(1 for f in feedback_list if f.behavior == Behavior.GOOD)
    return bonus


def total_points(session: Any, feedback_list: Sequence[Any]) -> int:
    return base_points(session) + bonus_points(feedback_list)


def points_award(session: Any, feedback_list: Iterable[Any]) -> PointsAward:
    feedback_list = list(feedback_list)
    base = base_points(session)
    bonus = bonus_points(feedback_list)
    return PointsAward(base_points=base, bonus_points=bonus, total=base + bonus)
