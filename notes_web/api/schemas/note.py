"""
Esquemas Pydantic para `note`.
"""
from typing import List, Mapping, Optional, Union

from pydantic import BaseModel


class NoteListItem(BaseModel):
    id: str
    title: str


class NoteOut(BaseModel):
    id: str
    title: str
    body: str
    user_id: str
    created_at: str
    updated_at: str


class NoteDraft(BaseModel):
    """Formulario de nota ya validado (title/body no vacíos)."""
    title: str
    body: str


class NoteFieldErrors(BaseModel):
    title: Optional[str] = None
    body: Optional[str] = None


class NoteActionData(BaseModel):
    errors: NoteFieldErrors

    def to_json(self) -> dict:
        return self.model_dump(exclude_none=True)


FOCUS_ORDER: List[str] = ["title", "body"]


def parse_note_form(form: Mapping[str, object]) -> Union[NoteDraft, NoteActionData]:
    """Convierte el form crudo en `NoteDraft` o en el error del primer campo inválido.

    El orden es fijo: `title` antes que `body`; solo se reporta un error.
    """
    title = form.get("title")
    body = form.get("body")

    if not isinstance(title, str) or len(title) == 0:
        return NoteActionData(errors=NoteFieldErrors(title="Title is required"))

    if not isinstance(body, str) or len(body) == 0:
        return NoteActionData(errors=NoteFieldErrors(body="Body is required"))

    return NoteDraft(title=title, body=body)


def first_invalid_field(action_data: Optional[NoteActionData]) -> Optional[str]:
    """Campo que debe recibir el foco tras un envío fallido (title tiene prioridad)."""
    if action_data is None:
        return None
    for name in FOCUS_ORDER:
        if getattr(action_data.errors, name):
            return name
    return None
