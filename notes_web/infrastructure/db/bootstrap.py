"""
Bootstrap de la base Mongo: asegura colecciones e índices mínimos.
No tumba la app si algo falla; deja warnings en casos no críticos.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from notes_web.infrastructure.db.mongo import get_db
from notes_web.repositories.note_repo import COLLECTION as NOTE_COLL
from notes_web.repositories.user_repo import COLLECTION as USER_COLL

_log = logging.getLogger("notes.mongo.bootstrap")


def _ensure_indexes(name: str, indexes: List[Dict[str, Any]]) -> None:
    coll = get_db()[name]
    for ix in indexes:
        spec = dict(ix)
        keys = spec.pop("keys")
        try:
            coll.create_index(keys, **spec)
        except PyMongoError as e:
            # Ignora fallas de índice (e.g., datos no únicos previos)
            _log.warning("No se pudo crear índice en '%s' (%s): %s", name, keys, e)


def ensure_collections() -> None:
    """
    Garantiza índices mínimos para usuarios y notas.
    """
    _ensure_indexes(USER_COLL, [
        {"keys": [("email", ASCENDING)], "unique": True, "name": "uniq_email"},
    ])
    # Listado por usuario ordenado por actualización
    _ensure_indexes(NOTE_COLL, [
        {"keys": [("user_id", ASCENDING), ("updated_at", DESCENDING)], "name": "user_updated"},
    ])
    _log.info("Colecciones e índices verificados")
