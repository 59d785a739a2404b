from __future__ import annotations

import logging
from typing import List, Optional

from sqlmodel import Session, select

from ..errors import ValidationError
from ..models import Feedback
from ..rules import Behavior, SessionStatus, validate_feedback
from .sessions import get_session, session_feedback
from .users import get_user

logger = logging.getLogger(__name__)


def submit_feedback(
    db: Session,
    session_id: int,
    student_id: int,
    rating: int,
    behavior: str,
    learned: str,
    comment: Optional[str] = None,
) -> Feedback:
    peer_session = get_session(db, session_id)
    get_user(db, student_id)
    # Completed sessions are already scored; later feedback would never count
    if peer_session.status == SessionStatus.COMPLETED:
        raise ValidationError(f"Session {session_id} is already completed")
    if student_id == peer_session.creator_id:
        raise ValidationError("Session creators cannot rate their own session")
    if student_id not in peer_session.attendee_ids:
        raise ValidationError(f"User {student_id} did not attend session {session_id}")
    validate_feedback(rating, behavior, learned)

    feedback = Feedback(
        session_id=peer_session.id,
        student_id=student_id,
        rating=rating,
        behavior=Behavior(behavior),
        learned=learned.strip(),
        comment=(comment or "").strip() or None,
    )
    db.add(feedback)
    db.commit()
    db.refresh(feedback)
    logger.info("User %s rated session %s: %s/%s", student_id, session_id, rating, feedback.behavior.value)
    return feedback


def feedback_for_session(db: Session, session_id: int) -> List[Feedback]:
    get_session(db, session_id)
    return session_feedback(db, session_id)


def feedback_by_student(db: Session, student_id: int) -> List[Feedback]:
    return list(db.exec(select(Feedback).where(Feedback.student_id == student_id).order_by(Feedback.id)).all())
