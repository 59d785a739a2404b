from sqlmodel import Session, SQLModel

from peerlearn.db import create_db_and_tables, engine
from peerlearn.logging_config import configure_logging
from peerlearn.services import feedback as feedback_service
from peerlearn.services import sessions as session_service
from peerlearn.services import users as user_service
from peerlearn.services.completion import complete_session

configure_logging()
SQLModel.metadata.drop_all(engine)
create_db_and_tables()

with Session(engine) as db:
    # Mentors and learners
    kai = user_service.create_user(db, "kai@example.com", "Kai Nguyen")
    mia = user_service.create_user(db, "mia@example.com", "Mia Singh")
    noah = user_service.create_user(db, "noah@example.com", "Noah Smith")
    ava = user_service.create_user(db, "ava@example.com", "Ava Brown")

    # A finished, well-rated session
    recursion = session_service.create_session(
        db, kai.id, "Recursion without tears", skill="Python", skill_level="Intermediate", max_seats=4,
    )
    for learner in (mia, noah, ava):
        session_service.join_session(db, recursion.id, learner.id)
    feedback_service.submit_feedback(db, recursion.id, mia.id, 5, "Good", "How the call stack unwinds")
    feedback_service.submit_feedback(db, recursion.id, noah.id, 5, "Good", "Always write the base case first")
    feedback_service.submit_feedback(db, recursion.id, ava.id, 4, "Neutral", "Memoising with a dict")
    complete_session(db, recursion.id, kai.id)

    # Still open
    algebra = session_service.create_session(db, mia.id, "Factorising quadratics", skill="Maths")
    session_service.join_session(db, algebra.id, noah.id)

    print("Database seeded. Try: GET /users/leaderboard")
