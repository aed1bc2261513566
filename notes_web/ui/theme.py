"""
Modo de color (claro/oscuro) y tokens de estilo para las plantillas.

Los tokens siguen la forma "<color>.<tono>" (p. ej. "blue.100"); la
plantilla los traduce a CSS con `css_color`. Un token vacío significa
"sin estilo propio" (hereda del contenedor).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

ColorMode = Literal["light", "dark"]

LIGHT: ColorMode = "light"
DARK: ColorMode = "dark"
COLOR_MODES: Tuple[ColorMode, ...] = (LIGHT, DARK)


@dataclass(frozen=True)
class NoteItemStyle:
    bg: str = ""
    color: str = ""


# (modo, activo) -> estilo de la entrada de la lista de notas
NOTE_ITEM_STYLES: Dict[Tuple[ColorMode, bool], NoteItemStyle] = {
    (LIGHT, True): NoteItemStyle(bg="blue.100"),
    (LIGHT, False): NoteItemStyle(),
    (DARK, True): NoteItemStyle(bg="purple.900"),
    (DARK, False): NoteItemStyle(bg="gray.200", color="black"),
}

PALETTE: Dict[str, str] = {
    "white": "#FFFFFF",
    "black": "#000000",
    "gray.50": "#F7FAFC",
    "gray.100": "#EDF2F7",
    "gray.200": "#E2E8F0",
    "gray.800": "#1A202C",
    "gray.900": "#171923",
    "blue.100": "#BEE3F8",
    "purple.900": "#322659",
}


def resolve_color_mode(raw: Optional[str], default: ColorMode = LIGHT) -> ColorMode:
    """Normaliza el valor de la cookie; valores desconocidos usan `default`."""
    value = (raw or "").strip().lower()
    if value in COLOR_MODES:
        return value  # type: ignore[return-value]
    return default


def toggle_color_mode(mode: ColorMode) -> ColorMode:
    return DARK if mode == LIGHT else LIGHT


def color_mode_value(light: str, dark: str, mode: ColorMode) -> str:
    """Elige el token según el modo actual."""
    return light if mode == LIGHT else dark


def note_item_style(mode: ColorMode, is_active: bool) -> NoteItemStyle:
    return NOTE_ITEM_STYLES[(mode, bool(is_active))]


def css_color(token: str) -> str:
    """Token -> color CSS. Los tokens vacíos o desconocidos devuelven ""."""
    if not token:
        return ""
    return PALETTE.get(token, "")
