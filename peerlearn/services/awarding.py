from __future__ import annotations

import logging
from typing import Optional

from sqlmodel import Session, select

from ..models import BadgeGrant, Certificate, PeerSession, PointLedger
from ..rules import BadgeThreshold, CertificateType, FeedbackSummary

logger = logging.getLogger(__name__)


def award_points(
    db: Session,
    user_id: int,
    delta: int,
    reason: str,
    *,
    session_id: Optional[int] = None,
    source: str = "session",
    commit: bool = True,
) -> Optional[PointLedger]:
    """Append a ledger entry. Zero deltas are not recorded."""
    if delta == 0:
        return None
    entry = PointLedger(user_id=user_id, delta=delta, reason=reason, source=source, session_id=session_id)
    db.add(entry)
    if commit:
        db.commit()
    logger.info("Awarded %s points to user %s (%s)", delta, user_id, reason)
    return entry


def grant_badge(
    db: Session,
    user_id: int,
    badge: BadgeThreshold,
    *,
    session_id: Optional[int] = None,
    commit: bool = True,
) -> tuple[BadgeGrant, bool]:
    """
    Idempotently grant a threshold badge.
    Returns (grant, created). If commit=True (default), commits the session;
    otherwise caller is responsible for committing/rolling back.
    """
    grant = db.exec(
        select(BadgeGrant).where(BadgeGrant.user_id == user_id, BadgeGrant.name == badge.name)
    ).first()
    if grant:
        return grant, False

    grant = BadgeGrant(
        user_id=user_id,
        name=badge.name,
        threshold_points=badge.threshold_points,
        session_id=session_id,
    )
    db.add(grant)
    if commit:
        db.commit()
    logger.info("Granted badge %r to user %s", badge.name, user_id)
    return grant, True


def issue_certificate(
    db: Session,
    peer_session: PeerSession,
    certificate_type: CertificateType,
    summary: FeedbackSummary,
    *,
    commit: bool = True,
) -> tuple[Certificate, bool]:
    """Idempotently issue the creator's certificate for a session. Returns (certificate, created)."""
    certificate = db.exec(
        select(Certificate).where(
            Certificate.session_id == peer_session.id,
            Certificate.user_id == peer_session.creator_id,
        )
    ).first()
    if certificate:
        return certificate, False

    certificate = Certificate(
        type=certificate_type,
        user_id=peer_session.creator_id,
        session_id=peer_session.id,
        session_title=peer_session.title,
        average_rating=summary.average_rating,
        total_attendees=len(peer_session.attendees),
    )
    db.add(certificate)
    if commit:
        db.commit()
    logger.info(
        "Issued %s certificate to user %s for session %s",
        certificate_type.value, peer_session.creator_id, peer_session.id,
    )
    return certificate, True
