"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from code_health.web.api import router


def create_app() -> FastAPI:
    app = FastAPI(title="code-health", version="0.1.0")
    app.include_router(router)
    return app
