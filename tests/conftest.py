from types import SimpleNamespace

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from peerlearn.db import create_db_and_tables, get_session
from peerlearn.main import app
from peerlearn.services import sessions as session_service
from peerlearn.services import users as user_service


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def creator(session):
    return user_service.create_user(session, "mentor@example.com", "Maya Mentor")


@pytest.fixture
def students(session):
    return [
        user_service.create_user(session, f"student{i}@example.com", f"Student {i}")
        for i in range(1, 4)
    ]


@pytest.fixture
def peer_session(session, creator):
    return session_service.create_session(session, creator.id, "Intro to Recursion", skill="Python")


def fb(rating, behavior="Good"):
    """Minimal feedback stand-in for the pure rule functions."""
    return SimpleNamespace(rating=rating, behavior=behavior)
