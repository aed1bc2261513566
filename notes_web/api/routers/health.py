"""Health (sin auth), salidas tipadas y estables."""
import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from notes_web.api.schemas.health import HealthOut, PingOut
from notes_web.repositories.user_repo import count_users

router = APIRouter(tags=["Health"])  # no prefix to keep paths stable

_log = logging.getLogger("notes.health")


@router.get("/ping", response_model=PingOut, summary="Ping básico")
def ping() -> PingOut:
    return PingOut(message="pong")


@router.get("/healthcheck", response_model=HealthOut, summary="Salud: Mongo accesible")
def healthcheck():
    try:
        count_users()
    except (PyMongoError, RuntimeError) as e:
        _log.error("healthcheck failed: %s", e)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"ok": False})
    return HealthOut(ok=True)
