"""
Creación y verificación del JWT que viaja en la cookie de sesión.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict
from uuid import uuid4

import jwt as pyjwt

from notes_web.core.config import settings


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _secret() -> str:
    if not settings.session_secret:
        raise RuntimeError("SESSION_SECRET no configurado")
    return settings.session_secret


def create_session_token(*, user: Dict[str, Any]) -> str:
    """
    Genera un JWT válido por SESSION_MAX_AGE_DAYS.
    Claims: sub(user_id), email, token_version, iat, exp, jti.
    """
    now = _now_utc()
    exp = now + timedelta(days=settings.session_max_age_days)
    payload = {
        "sub": str(user["_id"]),
        "email": user.get("email"),
        "token_version": user.get("token_version", 0),
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
        "jti": str(uuid4()),
    }
    return pyjwt.encode(payload, _secret(), algorithm=settings.session_algorithm)


def verify_session_token(token: str) -> Dict[str, Any]:
    """
    Decodifica y valida firma/expiración. Devuelve payload.
    Lanza `jwt.InvalidTokenError` si el token no es válido.
    """
    return pyjwt.decode(token, key=_secret(), algorithms=[settings.session_algorithm])
