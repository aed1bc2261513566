"""
Excepciones de sesión y handlers globales (HTML para navegador, JSON si se pide).
"""
import logging
from typing import Any, Dict
from urllib.parse import urlencode

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_web.api.templating import render, wants_json
from notes_web.services.session_service import destroy_session


class LoginRequired(Exception):
    """No hay sesión válida: el navegador debe ir a /login."""

    def __init__(self, redirect_to: str = "/"):
        super().__init__(redirect_to)
        self.redirect_to = redirect_to


class LogoutRequired(Exception):
    """La sesión apunta a un usuario que ya no es válido."""


def _req_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", object()), "request_id", None)


def _error_response(request: Request, status_code: int, message: str):
    rid = _req_id(request)
    if wants_json(request):
        body: Dict[str, Any] = {"message": message}
        if rid:
            body["request_id"] = rid
        return JSONResponse(status_code=status_code, content=body)
    return render(
        request,
        "error.html",
        {"status_code": status_code, "message": message, "request_id": rid},
        status_code=status_code,
    )


def register_exception_handlers(app: FastAPI) -> None:
    log = logging.getLogger("notes.errors")

    @app.exception_handler(LoginRequired)
    async def _login_required_handler(request: Request, exc: LoginRequired):
        query = urlencode({"redirectTo": exc.redirect_to})
        return RedirectResponse(f"/login?{query}", status_code=status.HTTP_303_SEE_OTHER)

    @app.exception_handler(LogoutRequired)
    async def _logout_required_handler(request: Request, exc: LogoutRequired):
        response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
        return destroy_session(response)

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(request, exc.status_code, exc.detail or "HTTP error")

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        log.exception("Unhandled error request_id=%s", _req_id(request))
        return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
