from typing import List, Optional, TYPE_CHECKING
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel, Relationship

if TYPE_CHECKING:
    from .badge import BadgeGrant
    from .certificate import Certificate
    from .point_ledger import PointLedger


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True)
    name: str
    sessions_created: int = 0
    sessions_attended: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    points: List["PointLedger"] = Relationship(back_populates="user")
    badge_grants: List["BadgeGrant"] = Relationship(back_populates="user")
    certificates: List["Certificate"] = Relationship(back_populates="user")
