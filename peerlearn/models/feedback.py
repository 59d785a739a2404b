from typing import Optional, TYPE_CHECKING
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel, Relationship
from sqlalchemy import CheckConstraint

from ..rules.types import Behavior

if TYPE_CHECKING:
    from .session import PeerSession


class Feedback(SQLModel, table=True):
    __tablename__ = "feedback"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_feedback_rating_range"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: int = Field(foreign_key="sessions.id", index=True)
    student_id: int = Field(foreign_key="users.id", index=True)
    rating: int
    behavior: Behavior = Behavior.GOOD
    learned: str
    comment: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    session: "PeerSession" = Relationship(back_populates="feedback")
