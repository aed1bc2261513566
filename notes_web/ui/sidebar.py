"""
View model de la barra lateral del shell de notas.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from notes_web.api.schemas.note import NoteListItem
from notes_web.ui.theme import ColorMode, NoteItemStyle, color_mode_value, note_item_style

EMPTY_STATE_TEXT = "No notes yet"
NOTE_LABEL_PREFIX = "📝 "


@dataclass(frozen=True)
class SidebarEntry:
    id: str
    label: str
    href: str
    is_active: bool
    style: NoteItemStyle


@dataclass(frozen=True)
class Sidebar:
    new_note_href: str
    new_note_bg: str
    bg: str = "gray.50"
    entries: List[SidebarEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def empty_text(self) -> Optional[str]:
        return EMPTY_STATE_TEXT if self.is_empty else None


def build_sidebar(
    items: Sequence[NoteListItem],
    *,
    color_mode: ColorMode,
    active_note_id: Optional[str] = None,
) -> Sidebar:
    entries = []
    for item in items:
        note_id = item.id
        is_active = active_note_id is not None and note_id == active_note_id
        entries.append(
            SidebarEntry(
                id=note_id,
                label=f"{NOTE_LABEL_PREFIX}{item.title}",
                href=f"/notes/{note_id}",
                is_active=is_active,
                style=note_item_style(color_mode, is_active),
            )
        )
    return Sidebar(
        new_note_href="/notes/new",
        new_note_bg=color_mode_value("gray.100", "gray.900", color_mode),
        entries=entries,
    )
