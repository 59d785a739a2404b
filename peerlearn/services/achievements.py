from __future__ import annotations

from typing import List

from sqlmodel import Session, select

from ..models import BadgeGrant, Certificate
from ..rules import CertificateType
from .users import get_user

RECENT_BADGES = 5


def user_badges(db: Session, user_id: int) -> List[BadgeGrant]:
    get_user(db, user_id)
    return list(db.exec(
        select(BadgeGrant).where(BadgeGrant.user_id == user_id).order_by(BadgeGrant.threshold_points)
    ).all())


def badge_stats(db: Session, user_id: int) -> dict:
    badges = user_badges(db, user_id)
    recent = sorted(badges, key=lambda b: (b.issued_at, b.id), reverse=True)[:RECENT_BADGES]
    return {
        "total": len(badges),
        "recent": [b.name for b in recent],
    }


def user_certificates(db: Session, user_id: int) -> List[Certificate]:
    get_user(db, user_id)
    return list(db.exec(
        select(Certificate).where(Certificate.user_id == user_id).order_by(Certificate.issued_at.desc(), Certificate.id.desc())
    ).all())


def certificate_stats(db: Session, user_id: int) -> dict:
    certificates = user_certificates(db, user_id)
    by_type = {t.value: 0 for t in CertificateType}
    for certificate in certificates:
        by_type[CertificateType(certificate.type).value] += 1
    average = (
        round(sum(c.average_rating for c in certificates) / len(certificates), 2)
        if certificates else 0
    )
    return {"total": len(certificates), "by_type": by_type, "average_rating": average}
