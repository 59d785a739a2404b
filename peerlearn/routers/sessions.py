from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session
from peerlearn.db import get_session
from peerlearn.rules import SessionStatus
from peerlearn.schemas.session import CompleteRequest, JoinRequest, SessionCreate, SessionRead, SessionStats
from peerlearn.services import sessions as session_service
from peerlearn.services.completion import CompletionResult, complete_session

router = APIRouter()

@router.post("/", response_model=SessionRead, status_code=201)
async def create_session(form: SessionCreate, session: Session = Depends(get_session)):
    return session_service.create_session(
        session,
        form.creator_id,
        form.title,
        description=form.description,
        skill=form.skill,
        skill_level=form.skill_level,
        scheduled_at=form.scheduled_at,
        max_seats=form.max_seats,
    )

@router.get("/", response_model=List[SessionRead])
async def list_sessions(
    status: Optional[SessionStatus] = None,
    skill: Optional[str] = None,
    creator_id: Optional[int] = None,
    session: Session = Depends(get_session),
):
    return session_service.list_sessions(session, status=status, skill=skill, creator_id=creator_id)

@router.get("/{session_id}", response_model=SessionRead)
async def get_session_detail(session_id: int, session: Session = Depends(get_session)):
    return session_service.get_session(session, session_id)

@router.get("/{session_id}/stats", response_model=SessionStats)
async def get_session_stats(session_id: int, session: Session = Depends(get_session)):
    return session_service.session_stats(session, session_id)

@router.post("/{session_id}/attendees", response_model=SessionRead)
async def join_session(session_id: int, form: JoinRequest, session: Session = Depends(get_session)):
    return session_service.join_session(session, session_id, form.user_id)

@router.post("/{session_id}/complete", response_model=CompletionResult)
async def complete(session_id: int, form: CompleteRequest, session: Session = Depends(get_session)):
    return complete_session(session, session_id, form.user_id)
