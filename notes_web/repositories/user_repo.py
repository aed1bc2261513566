"""Persistencia de usuarios."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId

from notes_web.infrastructure.db.mongo import get_db

COLLECTION = "user"


def _now_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def find_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    """Busca usuario por email (email en minúsculas)."""
    return get_db()[COLLECTION].find_one({"email": email.lower()})


def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    """Obtiene usuario por id (str). Ids mal formados -> None."""
    if not ObjectId.is_valid(user_id):
        return None
    return get_db()[COLLECTION].find_one({"_id": ObjectId(user_id)})


def insert_user(*, email: str, password_hash: str) -> Dict[str, Any]:
    """Inserta usuario y devuelve el documento completo."""
    now = _now_iso()
    doc = {
        "email": email.lower(),
        "password_hash": password_hash,
        "token_version": 0,
        "created_at": now,
        "updated_at": now,
    }
    res = get_db()[COLLECTION].insert_one(doc)
    doc["_id"] = res.inserted_id
    return doc


def count_users() -> int:
    return get_db()[COLLECTION].count_documents({})
