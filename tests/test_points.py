import pytest

from peerlearn.rules import (
    SessionSnapshot,
    SessionStatus,
    base_points,
    bonus_points,
    points_award,
    total_points,
)
from tests.conftest import fb


def make_session(attendees, status=SessionStatus.SCHEDULED):
    return SessionSnapshot(id=1, title="t", status=status, attendees=list(range(100, 100 + attendees)), creator_id=1)


@pytest.mark.parametrize(
    "attendees, expected",
    [(0, 0), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (6, 7), (7, 8), (8, 10), (25, 10)],
)
def test_base_points_step_table(attendees, expected):
    assert base_points(make_session(attendees)) == expected


def test_base_points_adds_one_for_completion():
    assert base_points(make_session(5, SessionStatus.COMPLETED)) == 7
    assert base_points(make_session(0, SessionStatus.COMPLETED)) == 1


def test_base_points_is_monotonic():
    values = [base_points(make_session(n)) for n in range(0, 12)]
    assert values == sorted(values)


def test_ongoing_session_gets_no_completion_point():
    assert base_points(make_session(3, SessionStatus.ONGOING)) == 4


def test_base_points_accepts_plain_status_strings():
    snapshot = make_session(1)
    snapshot.status = "completed"
    assert base_points(snapshot) == 3


def test_bonus_points_empty():
    assert bonus_points([]) == 0


def test_bonus_points_high_rating_and_good_behaviour():
    assert bonus_points([fb(5, "Good"), fb(4, "Good")]) == 5


def test_bonus_points_just_below_threshold():
    # mean 4.4 -> no rating bonus, one Good
    assert bonus_points([fb(5, "Good"), fb(4, "Neutral"), fb(4, "Bad"), fb(5, "Neutral"), fb(4, "Neutral")]) == 1


def test_bonus_points_counts_only_good():
    assert bonus_points([fb(1, "Bad"), fb(2, "Neutral")]) == 0


def test_total_points_and_award():
    session = make_session(2, SessionStatus.COMPLETED)
    feedback = [fb(5, "Good"), fb(4, "Good")]
    assert total_points(session, feedback) == 4 + 5

    award = points_award(session, iter(feedback))
    assert award.base_points == 4
    assert award.bonus_points == 5
    assert award.total == 9
