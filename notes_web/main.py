"""Entrada principal de la app FastAPI (configura middlewares, excepciones y routers)."""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from notes_web.api.router import api_router
from notes_web.core.config import settings
from notes_web.core.exceptions import register_exception_handlers
from notes_web.core.logging import setup_logging
from notes_web.core.middleware import add_middlewares
from notes_web.infrastructure.db.bootstrap import ensure_collections
from notes_web.infrastructure.db.mongo import close_mongo, db_ready, init_mongo

_log = logging.getLogger("notes.startup")

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app_: FastAPI):
    init_mongo()
    # Garantiza índices mínimos si hay conexión
    if db_ready():
        ensure_collections()
    else:
        _log.warning("Mongo no listo; omitiendo ensure_collections()")
    yield
    close_mongo()


setup_logging(settings.log_level)
app = FastAPI(title=settings.app_name, lifespan=lifespan)

add_middlewares(app)
register_exception_handlers(app)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.include_router(api_router)
