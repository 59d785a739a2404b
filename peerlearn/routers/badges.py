from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session
from peerlearn.db import get_session
from peerlearn.rules import BADGE_THRESHOLDS, BadgeThreshold
from peerlearn.schemas.achievement import BadgeRead, BadgeStats
from peerlearn.services import achievements

router = APIRouter()

@router.get("/thresholds", response_model=List[BadgeThreshold])
async def get_thresholds():
    return list(BADGE_THRESHOLDS)

@router.get("/user/{user_id}", response_model=List[BadgeRead])
async def get_user_badges(user_id: int, session: Session = Depends(get_session)):
    return achievements.user_badges(session, user_id)

@router.get("/user/{user_id}/stats", response_model=BadgeStats)
async def get_badge_stats(user_id: int, session: Session = Depends(get_session)):
    return achievements.badge_stats(session, user_id)
