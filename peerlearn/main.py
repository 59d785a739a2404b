import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .db import create_db_and_tables
from .errors import (
    AlreadyJoinedError,
    CapacityError,
    InvalidStateTransition,
    NotFoundError,
    PeerLearnError,
    ValidationError,
)
from .logging_config import configure_logging
from .routers import badges, certificates, feedback, sessions, users

logger = logging.getLogger(__name__)

STATUS_CODES = {
    ValidationError: 422,
    NotFoundError: 404,
    CapacityError: 409,
    AlreadyJoinedError: 409,
    InvalidStateTransition: 409,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    create_db_and_tables()
    logger.info("Database ready")
    yield


app = FastAPI(title="Peer Learning Sessions", lifespan=lifespan)

app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
app.include_router(feedback.router, prefix="/feedback", tags=["feedback"])
app.include_router(badges.router, prefix="/badges", tags=["badges"])
app.include_router(certificates.router, prefix="/certificates", tags=["certificates"])


@app.exception_handler(PeerLearnError)
async def peerlearn_error_handler(request: Request, exc: PeerLearnError):
    status_code = STATUS_CODES.get(type(exc), 400)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


@app.get("/")
async def root():
    return {"app": app.title, "status": "ok"}
