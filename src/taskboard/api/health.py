"""Liveness, readiness and ping endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..db.session import Database, get_database
from ..schemas.common import Pong
from ..services.users import UserService, get_user_service

router = APIRouter()


@router.get("/ping", response_model=Pong)
def ping(service: UserService = Depends(get_user_service)):
    """Answer with a snapshot of the users table; fails when the store does."""
    return Pong(message="Pong!", result=service.list_users())


@router.get("/health")
async def health_check():
    """
    Health check endpoint for liveness probes.
    Returns 200 OK if the service is running.
    """
    return {"status": "healthy", "service": "taskboard"}


@router.get("/ready")
def readiness_check(database: Database = Depends(get_database)):
    """
    Readiness check endpoint.
    Returns 503 while the database does not answer.
    """
    if not database.health_check():
        return JSONResponse(status_code=503, content={"status": "unavailable", "service": "taskboard"})
    return {"status": "ready", "service": "taskboard"}
