from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, StrictInt

from ..rules import Behavior

class FeedbackCreate(BaseModel):
    session_id: int
    student_id: int
    # Range and text checks happen in the rules so API and service callers share them
    rating: StrictInt
    behavior: str = Behavior.GOOD.value
    learned: str = ""
    comment: Optional[str] = None

class FeedbackRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    session_id: int
    student_id: int
    rating: StrictInt
    behavior: Behavior
    learned: str
    comment: Optional[str] = None
    created_at: datetime
