from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class SessionStatus(str, Enum):
    SCHEDULED = "scheduled"
    ONGOING = "ongoing"
    COMPLETED = "completed"


class Behavior(str, Enum):
    GOOD = "Good"
    NEUTRAL = "Neutral"
    BAD = "Bad"


class CertificateType(str, Enum):
    PEER_MENTOR = "peer-mentor"
    OUTSTANDING_HELPER = "outstanding-helper"


class SessionSnapshot(BaseModel):
    """Plain view of a session handed to the rules by the storage layer."""
    id: Optional[int] = None
    title: str = ""
    status: SessionStatus = SessionStatus.SCHEDULED
    attendees: List[int] = Field(default_factory=list)
    max_seats: Optional[int] = None
    creator_id: Optional[int] = None


class PointsAward(BaseModel):
    base_points: int
    bonus_points: int
    total: int


class FeedbackSummary(BaseModel):
    average_rating: float = 0
    total_feedback: int = 0
    good_count: int = 0
    neutral_count: int = 0
    bad_count: int = 0


class CertificateEligibility(BaseModel):
    peer_mentor: bool
    outstanding_helper: bool


class BadgeThreshold(BaseModel):
    name: str
    threshold_points: int
