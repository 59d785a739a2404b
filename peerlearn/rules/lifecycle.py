from __future__ import annotations

from ..errors import AlreadyJoinedError, CapacityError, InvalidStateTransition
from .types import SessionSnapshot, SessionStatus

_ORDER = {
    SessionStatus.SCHEDULED: 0,
    SessionStatus.ONGOING: 1,
    SessionStatus.COMPLETED: 2,
}


def transition(session: SessionSnapshot, target: SessionStatus) -> SessionSnapshot:
    """Return a copy of ``session`` moved forward to ``target``."""
    current = SessionStatus(session.status)
    target = SessionStatus(target)
    if current == SessionStatus.COMPLETED:
        raise InvalidStateTransition(f"Session {session.id} is already completed")
    if _ORDER[target] <= _ORDER[current]:
        raise InvalidStateTransition(f"Cannot move session {session.id} from {current.value} to {target.value}")
    return session.model_copy(update={"status": target})


def complete_session(session: SessionSnapshot) -> SessionSnapshot:
    return transition(session, SessionStatus.COMPLETED)


def add_attendee(session: SessionSnapshot, user_id: int) -> SessionSnapshot:
    """
    Return a copy of ``session`` with ``user_id`` on the roster.

    The creator may always join; everyone else needs a free seat when the
    session has a seat limit.
    """
    if user_id in session.attendees:
        raise AlreadyJoinedError(f"User {user_id} already joined session {session.id}")
    if (
        session.max_seats is not None
        and len(session.attendees) >= session.max_seats
        and user_id != session.creator_id
    ):
        raise CapacityError(f"Session {session.id} is full ({session.max_seats} seats)")
    return session.model_copy(update={"attendees": [*session.attendees, user_id]})
