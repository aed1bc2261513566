"""
Páginas de notas: shell (lista + contenido), creación, detalle y borrado.

Todas las rutas exigen sesión. El shell se arma en cada request con la
lista de notas del usuario; cada ruta aporta solo la parte de contenido.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from notes_web.api.deps import require_user
from notes_web.api.schemas.note import NoteActionData, first_invalid_field, parse_note_form
from notes_web.api.templating import get_color_mode, render, wants_json
from notes_web.services import note_service
from notes_web.ui.sidebar import build_sidebar

router = APIRouter(prefix="/notes", tags=["Notes"])


def _render_shell(
    request: Request,
    *,
    user: Dict[str, Any],
    template: str,
    context: Optional[Dict[str, Any]] = None,
    active_note_id: Optional[str] = None,
    status_code: int = 200,
):
    user_id = str(user["_id"])
    items = note_service.get_note_list_items(user_id=user_id)
    ctx: Dict[str, Any] = {
        "user": user,
        "sidebar": build_sidebar(items, color_mode=get_color_mode(request), active_note_id=active_note_id),
    }
    ctx.update(context or {})
    return render(request, template, ctx, status_code=status_code)


@router.get("", summary="Shell de notas")
def notes_index(request: Request, user: Dict[str, Any] = Depends(require_user)):
    return _render_shell(request, user=user, template="notes/index.html")


@router.get("/new", summary="Formulario de nueva nota")
def new_note_form(request: Request, user: Dict[str, Any] = Depends(require_user)):
    return _render_shell(
        request,
        user=user,
        template="notes/new.html",
        context={"action_data": None, "focus": None, "values": {}},
    )


@router.post("/new", summary="Crear nota")
async def create_note(request: Request, user: Dict[str, Any] = Depends(require_user)):
    form = await request.form()
    result = parse_note_form(form)

    if isinstance(result, NoteActionData):
        if wants_json(request):
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result.to_json())
        return _render_shell(
            request,
            user=user,
            template="notes/new.html",
            context={
                "action_data": result,
                "focus": first_invalid_field(result),
                "values": {k: form.get(k) or "" for k in ("title", "body")},
            },
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    note_id = note_service.create_note(draft=result, user_id=str(user["_id"]))
    return RedirectResponse(f"/notes/{note_id}", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/{note_id}", summary="Detalle de nota")
def note_detail(note_id: str, request: Request, user: Dict[str, Any] = Depends(require_user)):
    note = note_service.get_note(note_id=note_id, user_id=str(user["_id"]))
    if not note:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    return _render_shell(
        request,
        user=user,
        template="notes/detail.html",
        context={"note": note},
        active_note_id=note.id,
    )


@router.post("/{note_id}/delete", summary="Borrar nota")
def delete_note(note_id: str, user: Dict[str, Any] = Depends(require_user)):
    if not note_service.delete_note(note_id=note_id, user_id=str(user["_id"])):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    return RedirectResponse("/notes", status_code=status.HTTP_303_SEE_OTHER)
