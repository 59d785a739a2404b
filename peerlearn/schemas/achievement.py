from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict

from ..rules import CertificateType

class BadgeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    threshold_points: int
    session_id: Optional[int] = None
    issued_at: datetime

class BadgeStats(BaseModel):
    total: int
    recent: List[str]

class CertificateRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: CertificateType
    user_id: int
    session_id: int
    session_title: str
    average_rating: float
    total_attendees: int
    issued_at: datetime

class CertificateStats(BaseModel):
    total: int
    by_type: Dict[str, int]
    average_rating: float
