"""
Service layer for notes: thin wrappers over repositories.
"""
import logging
from typing import List, Optional

from notes_web.api.schemas.note import NoteDraft, NoteListItem, NoteOut
from notes_web.repositories import note_repo

_log = logging.getLogger("notes.notes")


def get_note_list_items(*, user_id: str) -> List[NoteListItem]:
    return [NoteListItem(**i) for i in note_repo.get_note_list_items(user_id=user_id)]


def get_note(*, note_id: str, user_id: str) -> Optional[NoteOut]:
    doc = note_repo.get_note(note_id=note_id, user_id=user_id)
    return NoteOut(**doc) if doc else None


def create_note(*, draft: NoteDraft, user_id: str) -> str:
    """Crea la nota y devuelve su id."""
    note = note_repo.create_note(title=draft.title, body=draft.body, user_id=user_id)
    _log.info("note created id=%s user_id=%s", note["id"], user_id)
    return note["id"]


def delete_note(*, note_id: str, user_id: str) -> bool:
    deleted = note_repo.delete_note(note_id=note_id, user_id=user_id)
    if deleted:
        _log.info("note deleted id=%s user_id=%s", note_id, user_id)
    return deleted
