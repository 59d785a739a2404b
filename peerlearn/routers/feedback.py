from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session
from peerlearn.db import get_session
from peerlearn.schemas.feedback import FeedbackCreate, FeedbackRead
from peerlearn.services import feedback as feedback_service

router = APIRouter()

@router.post("/", response_model=FeedbackRead, status_code=201)
async def submit_feedback(form: FeedbackCreate, session: Session = Depends(get_session)):
    return feedback_service.submit_feedback(
        session,
        form.session_id,
        form.student_id,
        form.rating,
        form.behavior,
        form.learned,
        form.comment,
    )

@router.get("/session/{session_id}", response_model=List[FeedbackRead])
async def feedback_for_session(session_id: int, session: Session = Depends(get_session)):
    return feedback_service.feedback_for_session(session, session_id)

@router.get("/student/{student_id}", response_model=List[FeedbackRead])
async def feedback_by_student(student_id: int, session: Session = Depends(get_session)):
    return feedback_service.feedback_by_student(session, student_id)
