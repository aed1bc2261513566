"""
Lógica de autenticación: registro y verificación de login.
"""
import logging
from typing import Any, Dict, Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from argon2.low_level import Type

from notes_web.repositories import user_repo as repo

_log = logging.getLogger("notes.auth")

ph = PasswordHasher(time_cost=2, memory_cost=51200, parallelism=2, hash_len=32, salt_len=16, type=Type.ID)


class UserAlreadyExists(ValueError):
    pass


def hash_password(password: str) -> str:
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return ph.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def register_user(*, email: str, password: str) -> Dict[str, Any]:
    """Crea usuario local; lanza `UserAlreadyExists` si el email ya está en uso."""
    email = email.lower()
    if repo.find_user_by_email(email):
        raise UserAlreadyExists("A user already exists with this email")
    user = repo.insert_user(email=email, password_hash=hash_password(password))
    _log.info("user registered id=%s", user["_id"])
    return user


def verify_login(*, email: str, password: str) -> Optional[Dict[str, Any]]:
    """Devuelve el usuario si las credenciales son válidas, si no None."""
    u = repo.find_user_by_email(email.lower())
    if not u or not u.get("password_hash"):
        return None
    if not verify_password(password, u["password_hash"]):
        _log.info("login rejected user_id=%s", u["_id"])
        return None
    return u
