"""
Dependencias reutilizables para routers (FastAPI Depends).

- Sesión: resuelve el usuario desde la cookie o exige login.
- Mantener esta capa delgada: sin lógica de negocio pesada.
"""
from typing import Any, Dict, Optional

from fastapi import Depends, Request

from notes_web.core.exceptions import LoginRequired, LogoutRequired
from notes_web.repositories import user_repo as repo
from notes_web.services.session_service import read_session


def get_user_id(request: Request) -> Optional[str]:
    payload = read_session(request)
    if not payload:
        return None
    return payload.get("sub") or None


def require_user_id(request: Request) -> str:
    """Id del usuario de la sesión; sin sesión -> redirect a /login."""
    user_id = get_user_id(request)
    if not user_id:
        redirect_to = request.url.path
        if request.url.query:
            redirect_to = f"{redirect_to}?{request.url.query}"
        raise LoginRequired(redirect_to=redirect_to)
    return user_id


def _load_user(request: Request, user_id: str) -> Optional[Dict[str, Any]]:
    u = repo.get_user_by_id(user_id)
    if not u:
        return None
    payload = read_session(request) or {}
    if u.get("token_version", 0) != payload.get("token_version", 0):
        return None
    return u


def get_optional_user(request: Request) -> Optional[Dict[str, Any]]:
    user_id = get_user_id(request)
    if not user_id:
        return None
    return _load_user(request, user_id)


def require_user(request: Request, user_id: str = Depends(require_user_id)) -> Dict[str, Any]:
    """Usuario completo; si la sesión ya no corresponde a un usuario válido se cierra."""
    u = _load_user(request, user_id)
    if not u:
        raise LogoutRequired()
    return u
