"""Repo de la colección `note`.

Toda lectura/escritura filtra por `user_id`: una nota solo es visible para
su dueño.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import DESCENDING

from notes_web.infrastructure.db.mongo import get_db

COLLECTION = "note"


def _now_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _oid(note_id: str) -> Optional[ObjectId]:
    return ObjectId(note_id) if ObjectId.is_valid(note_id) else None


def _out(doc: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(doc)
    data["id"] = str(data.pop("_id"))
    return data


def get_note_list_items(*, user_id: str) -> List[Dict[str, Any]]:
    """Lista {id, title} del usuario (ordenadas por updated_at desc)."""
    cursor = (
        get_db()[COLLECTION]
        .find({"user_id": str(user_id)}, {"title": 1})
        .sort([("updated_at", DESCENDING), ("_id", DESCENDING)])
    )
    return [{"id": str(d["_id"]), "title": d["title"]} for d in cursor]


def get_note(*, note_id: str, user_id: str) -> Optional[Dict[str, Any]]:
    """Nota completa del usuario, o None si no existe o es de otro usuario."""
    oid = _oid(note_id)
    if oid is None:
        return None
    doc = get_db()[COLLECTION].find_one({"_id": oid, "user_id": str(user_id)})
    return _out(doc) if doc else None


def create_note(*, title: str, body: str, user_id: str) -> Dict[str, Any]:
    """Inserta nota y devuelve {id}."""
    now = _now_iso()
    res = get_db()[COLLECTION].insert_one({
        "title": title,
        "body": body,
        "user_id": str(user_id),
        "created_at": now,
        "updated_at": now,
    })
    return {"id": str(res.inserted_id)}


def delete_note(*, note_id: str, user_id: str) -> bool:
    oid = _oid(note_id)
    if oid is None:
        return False
    res = get_db()[COLLECTION].delete_one({"_id": oid, "user_id": str(user_id)})
    return res.deleted_count > 0

