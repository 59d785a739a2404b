from typing import Optional, TYPE_CHECKING
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel, Relationship, Session, select
from sqlalchemy import CheckConstraint, func

if TYPE_CHECKING:
    from .user import User


class PointLedger(SQLModel, table=True):
    __tablename__ = "point_ledger"
    __table_args__ = (
        CheckConstraint("delta <> 0", name="ck_ledger_delta_nonzero"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    delta: int
    reason: Optional[str] = None
    source: str = "session"  # session|manual
    session_id: Optional[int] = Field(default=None, foreign_key="sessions.id")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)

    user: "User" = Relationship(back_populates="points")


# Helper: total points for a user

def user_total_points(db: Session, user_id: int) -> int:
    total = db.exec(
        select(func.coalesce(func.sum(PointLedger.delta), 0)).where(PointLedger.user_id == user_id)
    ).one()
    return int(total)
