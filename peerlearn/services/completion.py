"""
Session completion.

Completing a session is the only place points, badges and certificates are
written. The stored status is checked and set inside the same unit of work as
those writes, so a second completion request fails with
InvalidStateTransition before anything is awarded twice.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel
from sqlalchemy import update
from sqlmodel import Session, select

from ..errors import InvalidStateTransition, ValidationError
from ..models import BadgeGrant, PeerSession, user_total_points
from ..rules import (
    BADGE_THRESHOLDS,
    CertificateEligibility,
    CertificateType,
    FeedbackSummary,
    PointsAward,
    SessionStatus,
    aggregate,
    awardable_badges,
    certificate_eligibility,
    choose_certificate_type,
    complete_session as complete_snapshot,
    points_award,
)
from .awarding import award_points, grant_badge, issue_certificate
from .sessions import get_session, session_feedback

logger = logging.getLogger(__name__)


class CompletionResult(BaseModel):
    session_id: int
    creator_id: int
    points: PointsAward
    feedback: FeedbackSummary
    eligibility: CertificateEligibility
    certificate_type: Optional[CertificateType] = None
    certificate_id: Optional[int] = None
    new_badges: List[str] = []
    creator_total_points: int


def complete_session(db: Session, session_id: int, acting_user_id: int) -> CompletionResult:
    peer_session = get_session(db, session_id)
    if acting_user_id != peer_session.creator_id:
        raise ValidationError("Only the session creator can complete a session")

    try:
        completed = complete_snapshot(peer_session.snapshot())
    except InvalidStateTransition:
        logger.warning("Rejected repeated completion of session %s", session_id)
        raise

    # Check-and-set against the stored row, not just the loaded copy
    result = db.exec(
        update(PeerSession)
        .where(PeerSession.id == session_id, PeerSession.status != SessionStatus.COMPLETED)
        .values(status=completed.status, completed_at=datetime.now(timezone.utc))
    )
    if result.rowcount != 1:
        db.rollback()
        logger.warning("Session %s was completed concurrently", session_id)
        raise InvalidStateTransition(f"Session {session_id} is already completed")
    db.refresh(peer_session)

    feedback_list = session_feedback(db, session_id)
    award = points_award(completed, feedback_list)
    summary = aggregate(feedback_list)
    creator_id = peer_session.creator_id

    award_points(
        db, creator_id, award.total, f"Session: {peer_session.title}",
        session_id=peer_session.id, commit=False,
    )
    db.flush()

    total = user_total_points(db, creator_id)
    held = db.exec(select(BadgeGrant.name).where(BadgeGrant.user_id == creator_id)).all()
    new_badges = awardable_badges(total, held)
    thresholds = {badge.name: badge for badge in BADGE_THRESHOLDS}
    for name in new_badges:
        grant_badge(db, creator_id, thresholds[name], session_id=peer_session.id, commit=False)

    eligibility = certificate_eligibility(completed, feedback_list)
    certificate_type = choose_certificate_type(eligibility)
    certificate = None
    if certificate_type is not None:
        certificate, _ = issue_certificate(db, peer_session, certificate_type, summary, commit=False)

    db.commit()
    logger.info(
        "Session %s completed: %s points to user %s (base %s, bonus %s), badges=%s, certificate=%s",
        session_id, award.total, creator_id, award.base_points, award.bonus_points,
        new_badges, certificate_type.value if certificate_type else None,
    )
    return CompletionResult(
        session_id=peer_session.id,
        creator_id=creator_id,
        points=award,
        feedback=summary,
        eligibility=eligibility,
        certificate_type=certificate_type,
        certificate_id=certificate.id if certificate else None,
        new_badges=new_badges,
        creator_total_points=total,
    )
