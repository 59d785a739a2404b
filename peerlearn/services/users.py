from __future__ import annotations

import logging
from typing import List

from sqlalchemy import func
from sqlmodel import Session, select

from ..config import settings
from ..errors import NotFoundError, ValidationError
from ..models import BadgeGrant, Certificate, PointLedger, User, user_total_points

logger = logging.getLogger(__name__)


def create_user(db: Session, email: str, name: str) -> User:
    email = (email or "").lower().strip()
    name = (name or "").strip()
    if not email or "@" not in email:
        raise ValidationError("A valid email address is required")
    if not name:
        raise ValidationError("Name is required")
    if db.exec(select(User).where(User.email == email)).first():
        raise ValidationError(f"A user with email {email} already exists")

    user = User(email=email, name=name)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s (%s)", user.id, email)
    return user


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFoundError(f"User {user_id} not found")
    return user


def find_user_by_email(db: Session, email: str) -> User:
    user = db.exec(select(User).where(User.email == email.lower().strip())).first()
    if not user:
        raise NotFoundError(f"No user with email {email}")
    return user


def leaderboard(db: Session, limit: int | None = None) -> List[dict]:
    total = func.coalesce(func.sum(PointLedger.delta), 0).label("total_points")
    rows = db.exec(
        select(User.id, User.name, total)
        .outerjoin(PointLedger, PointLedger.user_id == User.id)
        .group_by(User.id)
        .order_by(total.desc(), User.name)
        .limit(limit or settings.LEADERBOARD_LIMIT)
    ).all()
    return [
        {"rank": rank, "user_id": user_id, "name": name, "total_points": int(points)}
        for rank, (user_id, name, points) in enumerate(rows, start=1)
    ]


def user_profile(db: Session, user_id: int) -> dict:
    user = get_user(db, user_id)
    badges = db.exec(
        select(BadgeGrant.name).where(BadgeGrant.user_id == user_id).order_by(BadgeGrant.threshold_points)
    ).all()
    certificate_count = db.exec(
        select(func.count(Certificate.id)).where(Certificate.user_id == user_id)
    ).one()
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "total_points": user_total_points(db, user_id),
        "sessions_created": user.sessions_created,
        "sessions_attended": user.sessions_attended,
        "badges": list(badges),
        "certificate_count": int(certificate_count),
    }
