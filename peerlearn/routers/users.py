from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session
from peerlearn.db import get_session
from peerlearn.schemas.user import LeaderboardEntry, LoginForm, UserCreate, UserProfile, UserRead
from peerlearn.services import users as user_service

router = APIRouter()

@router.post("/", response_model=UserRead, status_code=201)
async def create_user(form: UserCreate, session: Session = Depends(get_session)):
    return user_service.create_user(session, form.email, form.name)

@router.post("/login", response_model=UserRead)
async def login(form: LoginForm, session: Session = Depends(get_session)):
    # Email-only sign in; there are no passwords in this app
    return user_service.find_user_by_email(session, form.email)

@router.get("/leaderboard", response_model=List[LeaderboardEntry])
async def leaderboard(limit: Optional[int] = None, session: Session = Depends(get_session)):
    return user_service.leaderboard(session, limit)

@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, session: Session = Depends(get_session)):
    return user_service.get_user(session, user_id)

@router.get("/{user_id}/profile", response_model=UserProfile)
async def get_profile(user_id: int, session: Session = Depends(get_session)):
    return user_service.user_profile(session, user_id)
