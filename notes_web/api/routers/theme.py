"""Alterna el modo de color (claro/oscuro) guardado en cookie."""
from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from notes_web.api.templating import get_color_mode
from notes_web.core.config import settings
from notes_web.services.session_service import safe_redirect
from notes_web.ui.theme import toggle_color_mode

router = APIRouter(tags=["Theme"])

ONE_YEAR = 365 * 24 * 60 * 60


@router.post("/theme", summary="Alternar modo claro/oscuro")
async def toggle_theme(request: Request):
    form = await request.form()
    redirect_to = form.get("redirectTo")
    target = safe_redirect(redirect_to if isinstance(redirect_to, str) else None, "/notes")

    response = RedirectResponse(target, status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        settings.color_mode_cookie_name,
        toggle_color_mode(get_color_mode(request)),
        max_age=ONE_YEAR,
        samesite="lax",
        path="/",
    )
    return response
