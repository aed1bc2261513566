"""Plantillas Jinja2 y helpers de respuesta compartidos por los routers."""
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from notes_web.core.config import settings
from notes_web.ui.theme import ColorMode, color_mode_value, css_color, resolve_color_mode

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals.update(
    app_name=settings.app_name,
    css_color=css_color,
)


def get_color_mode(request: Request) -> ColorMode:
    return resolve_color_mode(
        request.cookies.get(settings.color_mode_cookie_name),
        default=settings.default_color_mode,
    )


def wants_json(request: Request) -> bool:
    """True si el cliente pide JSON explícitamente (fetch / API), no HTML."""
    accept = request.headers.get("accept", "")
    return "application/json" in accept and "text/html" not in accept


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    *,
    status_code: int = 200,
):
    mode = get_color_mode(request)
    ctx: Dict[str, Any] = {
        "color_mode": mode,
        "header_bg": color_mode_value("gray.100", "gray.900", mode),
        "outlet_bg": color_mode_value("", "gray.800", mode),
        "current_path": request.url.path,
    }
    ctx.update(context or {})
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)
