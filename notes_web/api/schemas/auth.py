"""
Esquemas Pydantic para los formularios de autenticación (login / join).

- Mantiene las validaciones y normalizaciones (p. ej. email en minúsculas).
- Los errores se reportan por campo, uno a la vez, en orden fijo.
"""
from typing import Mapping, Optional, Union

from pydantic import BaseModel, EmailStr, TypeAdapter, ValidationError, field_validator

from notes_web.core.config import settings

_email_adapter = TypeAdapter(EmailStr)


class AuthFieldErrors(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AuthActionData(BaseModel):
    errors: AuthFieldErrors

    def to_json(self) -> dict:
        return self.model_dump(exclude_none=True)


class Credentials(BaseModel):
    email: EmailStr
    password: str
    remember: bool = False
    redirect_to: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _lower_email(cls, v: EmailStr) -> str:
        return str(v).lower()


def _is_valid_email(value: object) -> bool:
    if not isinstance(value, str) or len(value) <= 3:
        return False
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def parse_credentials(form: Mapping[str, object]) -> Union[Credentials, AuthActionData]:
    """Valida email -> password requerido -> largo mínimo."""
    email = form.get("email")
    password = form.get("password")

    if not _is_valid_email(email):
        return AuthActionData(errors=AuthFieldErrors(email="Email is invalid"))

    if not isinstance(password, str) or len(password) == 0:
        return AuthActionData(errors=AuthFieldErrors(password="Password is required"))

    if len(password) < settings.password_min_length:
        return AuthActionData(errors=AuthFieldErrors(password="Password is too short"))

    redirect_to = form.get("redirectTo")
    return Credentials(
        email=email,
        password=password,
        remember=form.get("remember") == "on",
        redirect_to=redirect_to if isinstance(redirect_to, str) else None,
    )
