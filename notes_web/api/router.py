"""Agregador de routers de la app."""
from fastapi import APIRouter

from notes_web.api.routers import auth, health, notes, theme

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(notes.router)
api_router.include_router(theme.router)
