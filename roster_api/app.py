"""
FastAPI application entry point for the roster admin API.
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster_api.config import Settings, get_settings
from roster_api.dependencies import build_stores
from roster_api.errors import install_error_handlers
from roster_api.routes import router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    if not settings.admin_password:
        logger.error(
            "ADMIN_PASSWORD environment variable is not set. "
            "Application cannot start without it."
        )
        raise RuntimeError("ADMIN_PASSWORD is required")

    app = FastAPI(title="Roster Admin API", version="0.1.0")
    app.state.settings = settings
    app.state.stores = build_stores(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    app = create_app(settings)
    logger.info("Server running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
