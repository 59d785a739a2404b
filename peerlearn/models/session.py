from typing import List, Optional, TYPE_CHECKING
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel, Relationship
from sqlalchemy import CheckConstraint, UniqueConstraint

from ..rules.types import SessionSnapshot, SessionStatus

if TYPE_CHECKING:
    from .feedback import Feedback


class PeerSession(SQLModel, table=True):
    __tablename__ = "sessions"
    __table_args__ = (
        CheckConstraint("max_seats IS NULL OR max_seats > 0", name="ck_session_max_seats_pos"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    skill: Optional[str] = Field(default=None, index=True)
    skill_level: str = "Beginner"
    scheduled_at: Optional[datetime] = None
    max_seats: Optional[int] = None
    status: SessionStatus = Field(default=SessionStatus.SCHEDULED, index=True)
    creator_id: int = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None

    attendees: List["SessionAttendee"] = Relationship(back_populates="session")
    feedback: List["Feedback"] = Relationship(back_populates="session")

    @property
    def attendee_ids(self) -> List[int]:
        return [a.user_id for a in sorted(self.attendees, key=lambda a: a.id or 0)]

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            id=self.id,
            title=self.title,
            status=self.status,
            attendees=self.attendee_ids,
            max_seats=self.max_seats,
            creator_id=self.creator_id,
        )


class SessionAttendee(SQLModel, table=True):
    __tablename__ = "session_attendees"
    __table_args__ = (
        UniqueConstraint("session_id", "user_id", name="uq_attendee_session_user"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: int = Field(foreign_key="sessions.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    joined_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    session: "PeerSession" = Relationship(back_populates="attendees")
