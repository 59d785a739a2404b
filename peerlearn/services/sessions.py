from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from sqlmodel import Session, select

from ..errors import NotFoundError, PeerLearnError, ValidationError
from ..models import Feedback, PeerSession, SessionAttendee
from ..rules import (
    SessionStatus,
    add_attendee,
    aggregate,
    certificate_eligibility,
    choose_certificate_type,
    points_award,
)
from .users import get_user

logger = logging.getLogger(__name__)

SKILL_LEVELS = ("Beginner", "Intermediate", "Advanced")


def create_session(
    db: Session,
    creator_id: int,
    title: str,
    *,
    description: Optional[str] = None,
    skill: Optional[str] = None,
    skill_level: str = "Beginner",
    scheduled_at: Optional[datetime] = None,
    max_seats: Optional[int] = None,
) -> PeerSession:
    creator = get_user(db, creator_id)
    title = (title or "").strip()
    if not title:
        raise ValidationError("Session title is required")
    if skill_level not in SKILL_LEVELS:
        raise ValidationError(f"Skill level must be one of {', '.join(SKILL_LEVELS)}")
    if max_seats is not None and max_seats < 1:
        raise ValidationError("Max seats must be at least 1 when set")

    peer_session = PeerSession(
        title=title,
        description=description,
        skill=skill,
        skill_level=skill_level,
        scheduled_at=scheduled_at,
        max_seats=max_seats,
        creator_id=creator.id,
    )
    creator.sessions_created += 1
    db.add(peer_session)
    db.add(creator)
    db.commit()
    db.refresh(peer_session)
    logger.info("User %s created session %s (%r)", creator.id, peer_session.id, peer_session.title)
    return peer_session


def get_session(db: Session, session_id: int) -> PeerSession:
    peer_session = db.get(PeerSession, session_id)
    if not peer_session:
        raise NotFoundError(f"Session {session_id} not found")
    return peer_session


def list_sessions(
    db: Session,
    *,
    status: Optional[SessionStatus] = None,
    skill: Optional[str] = None,
    creator_id: Optional[int] = None,
) -> List[PeerSession]:
    query = select(PeerSession)
    if status is not None:
        query = query.where(PeerSession.status == status)
    if skill:
        query = query.where(PeerSession.skill == skill)
    if creator_id is not None:
        query = query.where(PeerSession.creator_id == creator_id)
    return list(db.exec(query.order_by(PeerSession.created_at.desc(), PeerSession.id.desc())).all())


def session_feedback(db: Session, session_id: int) -> List[Feedback]:
    return list(db.exec(
        select(Feedback).where(Feedback.session_id == session_id).order_by(Feedback.id)
    ).all())


def join_session(db: Session, session_id: int, user_id: int) -> PeerSession:
    peer_session = get_session(db, session_id)
    user = get_user(db, user_id)
    if peer_session.status == SessionStatus.COMPLETED:
        raise ValidationError(f"Session {session_id} is already completed")

    try:
        add_attendee(peer_session.snapshot(), user.id)
    except PeerLearnError as exc:
        logger.warning("User %s could not join session %s: %s", user.id, session_id, exc)
        raise

    db.add(SessionAttendee(session_id=peer_session.id, user_id=user.id))
    user.sessions_attended += 1
    db.add(user)
    db.commit()
    db.refresh(peer_session)
    logger.info("User %s joined session %s", user.id, session_id)
    return peer_session


def session_stats(db: Session, session_id: int) -> dict:
    """Points preview, feedback summary and certificate eligibility for one session."""
    peer_session = get_session(db, session_id)
    snapshot = peer_session.snapshot()
    feedback_list = session_feedback(db, session_id)
    eligibility = certificate_eligibility(snapshot, feedback_list)
    certificate_type = choose_certificate_type(eligibility)
    return {
        "session_id": peer_session.id,
        "status": peer_session.status,
        "attendee_count": len(snapshot.attendees),
        "points": points_award(snapshot, feedback_list),
        "feedback": aggregate(feedback_list),
        "eligibility": eligibility,
        "certificate_type": certificate_type,
    }
