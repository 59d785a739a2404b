from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session
from peerlearn.db import get_session
from peerlearn.schemas.achievement import CertificateRead, CertificateStats
from peerlearn.services import achievements

router = APIRouter()

@router.get("/user/{user_id}", response_model=List[CertificateRead])
async def get_user_certificates(user_id: int, session: Session = Depends(get_session)):
    return achievements.user_certificates(session, user_id)

@router.get("/user/{user_id}/stats", response_model=CertificateStats)
async def get_certificate_stats(user_id: int, session: Session = Depends(get_session)):
    return achievements.certificate_stats(session, user_id)
