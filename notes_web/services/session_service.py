"""
Sesión de usuario sobre cookie: crear, leer y destruir.

La cookie guarda un JWT firmado (ver token_service). Sin `remember` la
cookie dura lo que la sesión del navegador; el token expira igual a los
SESSION_MAX_AGE_DAYS.
"""
import logging
from typing import Any, Dict, Optional

import jwt as pyjwt
from fastapi import Request
from starlette.responses import Response

from notes_web.core.config import settings
from notes_web.services.token_service import create_session_token, verify_session_token

_log = logging.getLogger("notes.auth")

DEFAULT_REDIRECT = "/"


def safe_redirect(to: Optional[str], default: str = DEFAULT_REDIRECT) -> str:
    """Solo acepta rutas del mismo sitio ("/algo"), nunca "//host"."""
    if not to or not isinstance(to, str):
        return default
    if not to.startswith("/") or to.startswith("//") or to.startswith("/\\"):
        return default
    return to


def read_session(request: Request) -> Optional[Dict[str, Any]]:
    """Payload de la sesión actual o None (sin cookie, firma inválida o expirada)."""
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        return None
    try:
        return verify_session_token(token)
    except pyjwt.InvalidTokenError as e:
        _log.debug("session token rejected: %s", e)
        return None


def create_user_session(response: Response, *, user: Dict[str, Any], remember: bool) -> Response:
    response.set_cookie(
        settings.session_cookie_name,
        create_session_token(user=user),
        max_age=settings.session_max_age_seconds if remember else None,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
        path="/",
    )
    return response


def destroy_session(response: Response) -> Response:
    response.delete_cookie(
        settings.session_cookie_name,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return response
