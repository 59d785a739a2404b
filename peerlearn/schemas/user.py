from typing import List
from pydantic import BaseModel, ConfigDict

class UserCreate(BaseModel):
    email: str
    name: str

class LoginForm(BaseModel):
    email: str

class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    sessions_created: int
    sessions_attended: int

class UserProfile(BaseModel):
    id: int
    email: str
    name: str
    total_points: int
    sessions_created: int
    sessions_attended: int
    badges: List[str]
    certificate_count: int

class LeaderboardEntry(BaseModel):
    rank: int
    user_id: int
    name: str
    total_points: int
