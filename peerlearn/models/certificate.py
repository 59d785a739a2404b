from typing import Optional, TYPE_CHECKING
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel, Relationship
from sqlalchemy import UniqueConstraint

from ..rules.types import CertificateType

if TYPE_CHECKING:
    from .user import User


class Certificate(SQLModel, table=True):
    __tablename__ = "certificates"
    __table_args__ = (
        UniqueConstraint("session_id", "user_id", name="uq_certificate_session_user"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    type: CertificateType
    user_id: int = Field(foreign_key="users.id", index=True)
    session_id: int = Field(foreign_key="sessions.id", index=True)
    session_title: str
    average_rating: float = 0
    total_attendees: int = 0
    issued_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)

    user: "User" = Relationship(back_populates="certificates")
