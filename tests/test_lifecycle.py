import pytest

from peerlearn.errors import AlreadyJoinedError, CapacityError, InvalidStateTransition
from peerlearn.rules import SessionSnapshot, SessionStatus, add_attendee, complete_session, transition

CREATOR = 1


def snapshot(**kwargs):
    kwargs.setdefault("id", 10)
    kwargs.setdefault("creator_id", CREATOR)
    return SessionSnapshot(**kwargs)


def test_add_attendee_appends_and_leaves_original_untouched():
    session = snapshot(attendees=[2])
    joined = add_attendee(session, 3)
    assert joined.attendees == [2, 3]
    assert session.attendees == [2]


def test_add_attendee_rejects_duplicate():
    with pytest.raises(AlreadyJoinedError):
        add_attendee(snapshot(attendees=[2]), 2)


def test_add_attendee_full_session():
    with pytest.raises(CapacityError):
        add_attendee(snapshot(attendees=[2], max_seats=1), 3)


def test_creator_can_join_full_session():
    joined = add_attendee(snapshot(attendees=[2], max_seats=1), CREATOR)
    assert joined.attendees == [2, CREATOR]


def test_no_seat_limit():
    session = snapshot(attendees=list(range(2, 50)))
    assert len(add_attendee(session, 99).attendees) == 49


def test_complete_from_scheduled_and_ongoing():
    assert complete_session(snapshot()).status == SessionStatus.COMPLETED
    assert complete_session(snapshot(status=SessionStatus.ONGOING)).status == SessionStatus.COMPLETED


def test_complete_twice_fails():
    done = complete_session(snapshot())
    with pytest.raises(InvalidStateTransition):
        complete_session(done)


def test_no_backward_transitions():
    with pytest.raises(InvalidStateTransition):
        transition(snapshot(status=SessionStatus.ONGOING), SessionStatus.SCHEDULED)
    with pytest.raises(InvalidStateTransition):
        transition(snapshot(status=SessionStatus.COMPLETED), SessionStatus.SCHEDULED)
    with pytest.raises(InvalidStateTransition):
        transition(snapshot(), SessionStatus.SCHEDULED)


def test_scheduled_to_ongoing():
    assert transition(snapshot(), SessionStatus.ONGOING).status == SessionStatus.ONGOING
