from typing import Optional, TYPE_CHECKING
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel, Relationship
from sqlalchemy import UniqueConstraint

if TYPE_CHECKING:
    from .user import User


class BadgeGrant(SQLModel, table=True):
    __tablename__ = "badge_grants"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_grant_user_badge"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    name: str
    threshold_points: int
    session_id: Optional[int] = Field(default=None, foreign_key="sessions.id")
    issued_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)

    user: "User" = Relationship(back_populates="badge_grants")
