from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from ..rules import (
    CertificateEligibility,
    CertificateType,
    FeedbackSummary,
    PointsAward,
    SessionStatus,
)

class SessionCreate(BaseModel):
    creator_id: int
    title: str
    description: Optional[str] = None
    skill: Optional[str] = None
    skill_level: str = "Beginner"
    scheduled_at: Optional[datetime] = None
    max_seats: Optional[int] = None

class JoinRequest(BaseModel):
    user_id: int

class CompleteRequest(BaseModel):
    user_id: int

class SessionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    skill: Optional[str] = None
    skill_level: str
    scheduled_at: Optional[datetime] = None
    max_seats: Optional[int] = None
    status: SessionStatus
    creator_id: int
    attendee_ids: List[int]
    created_at: datetime
    completed_at: Optional[datetime] = None

class SessionStats(BaseModel):
    session_id: int
    status: SessionStatus
    attendee_count: int
    points: PointsAward
    feedback: FeedbackSummary
    eligibility: CertificateEligibility
    certificate_type: Optional[CertificateType] = None
