"""Carga un usuario demo con dos notas (desarrollo local).

Uso típico:
  PYTHONPATH=. python scripts/seed.py --email rachel@remix.run --password racheliscool

Características:
  - Si el usuario ya existe lo borra junto con sus notas antes de recrearlo.
  - Usa la misma capa de servicios que la app (hash argon2, timestamps).
"""
from __future__ import annotations

import argparse
import logging
from typing import Any, Dict

from notes_web.core.logging import setup_logging
from notes_web.infrastructure.db.mongo import db_ready, get_db, init_mongo
from notes_web.repositories import note_repo, user_repo
from notes_web.services import auth_service

_log = logging.getLogger("notes.seed")

DEMO_NOTES = [
    ("My first note", "Hello, world!"),
    ("My second note", "Hello, world!"),
]


def _reset_user(email: str) -> None:
    existing = user_repo.find_user_by_email(email)
    if not existing:
        return
    db = get_db()
    db[note_repo.COLLECTION].delete_many({"user_id": str(existing["_id"])})
    db[user_repo.COLLECTION].delete_one({"_id": existing["_id"]})
    _log.info("usuario previo eliminado email=%s", email)


def seed(email: str, password: str) -> Dict[str, Any]:
    _reset_user(email)
    user = auth_service.register_user(email=email, password=password)
    user_id = str(user["_id"])
    for title, body in DEMO_NOTES:
        note_repo.create_note(title=title, body=body, user_id=user_id)
    _log.info("seed listo user_id=%s notas=%s", user_id, len(DEMO_NOTES))
    return user


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed de datos demo")
    parser.add_argument("--email", default="rachel@remix.run")
    parser.add_argument("--password", default="racheliscool")
    args = parser.parse_args()

    setup_logging()
    init_mongo()
    if not db_ready():
        raise SystemExit("Mongo no accesible; revisa MONGO_URI")
    seed(args.email.lower(), args.password)


if __name__ == "__main__":
    main()
