"""Rutas de autenticación: landing, registro (join), login y logout."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from notes_web.api.deps import get_optional_user
from notes_web.api.schemas.auth import AuthActionData, AuthFieldErrors, parse_credentials
from notes_web.api.templating import render, wants_json
from notes_web.services import auth_service as service
from notes_web.services.session_service import create_user_session, destroy_session, safe_redirect

router = APIRouter(tags=["Auth"])


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def _auth_error(request: Request, template: str, action_data: AuthActionData, form) -> Any:
    if wants_json(request):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=action_data.to_json())
    return render(
        request,
        template,
        {
            "action_data": action_data,
            "focus": "email" if action_data.errors.email else "password",
            "email": form.get("email") or "",
            "redirect_to": form.get("redirectTo") or "",
        },
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.get("/", summary="Landing")
def index(request: Request, user: Optional[Dict[str, Any]] = Depends(get_optional_user)):
    return render(request, "index.html", {"user": user})


@router.get("/join", summary="Formulario de registro")
def join_form(request: Request, redirectTo: Optional[str] = None,
              user: Optional[Dict[str, Any]] = Depends(get_optional_user)):
    if user:
        return _redirect("/")
    return render(request, "join.html", {"action_data": None, "focus": None, "email": "", "redirect_to": redirectTo or ""})


@router.post("/join", summary="Registrar usuario")
async def join(request: Request):
    form = await request.form()
    result = parse_credentials(form)
    if isinstance(result, AuthActionData):
        return _auth_error(request, "join.html", result, form)

    try:
        user = service.register_user(email=result.email, password=result.password)
    except service.UserAlreadyExists as e:
        return _auth_error(request, "join.html", AuthActionData(errors=AuthFieldErrors(email=str(e))), form)

    response = _redirect(safe_redirect(result.redirect_to, "/"))
    return create_user_session(response, user=user, remember=False)


@router.get("/login", summary="Formulario de login")
def login_form(request: Request, redirectTo: Optional[str] = None,
               user: Optional[Dict[str, Any]] = Depends(get_optional_user)):
    if user:
        return _redirect("/")
    return render(request, "login.html", {"action_data": None, "focus": None, "email": "", "redirect_to": redirectTo or ""})


@router.post("/login", summary="Iniciar sesión")
async def login(request: Request):
    form = await request.form()
    result = parse_credentials(form)
    if isinstance(result, AuthActionData):
        return _auth_error(request, "login.html", result, form)

    user = service.verify_login(email=result.email, password=result.password)
    if not user:
        invalid = AuthActionData(errors=AuthFieldErrors(email="Invalid email or password"))
        return _auth_error(request, "login.html", invalid, form)

    response = _redirect(safe_redirect(result.redirect_to, "/notes"))
    return create_user_session(response, user=user, remember=result.remember)


@router.post("/logout", summary="Cerrar sesión")
def logout():
    return destroy_session(_redirect("/"))


@router.get("/logout", summary="Logout por GET")
def logout_get():
    return _redirect("/")
