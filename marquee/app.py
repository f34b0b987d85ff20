"""
HTTP control surface for the sign.

Run with: uvicorn --factory marquee.app:create_app
"""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marquee.core.config import Settings, get_settings
from marquee.core.log import configure_logging
from marquee.repositories.playlist_storage import SharedStorage, create_storage
from marquee.routers import brightness as brightness_router
from marquee.routers import playlist as playlist_router
from marquee.services.playlist_service import PlaylistService

DEV_ORIGINS = [
    "http://localhost:8000",
    "http://127.0.0.1:8000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def create_app(settings: Settings | None = None, storage: SharedStorage | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    settings = settings or get_settings()
    configure_logging(settings)
    storage = storage or create_storage(settings.storage_dir)

    app = FastAPI(title="Marquee Sign API")
    if settings.app_env != "prod":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=DEV_ORIGINS,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    app.state.playlist_service = PlaylistService(storage)

    @app.get("/health")
    def health():
        with storage.lock() as store:
            location = store.location
        return {"ok": True, "storage_dir": str(location)}

    app.include_router(playlist_router.router)
    app.include_router(brightness_router.router)
    return app
