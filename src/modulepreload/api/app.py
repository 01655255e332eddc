from __future__ import annotations

from fastapi import FastAPI

from modulepreload.api.lifespan import lifespan
from modulepreload.api.middleware import AllowAnyOriginMiddleware
from modulepreload.api.routes.health import router as health_router
from modulepreload.api.static import ModulePreloadStaticFiles
from modulepreload.config import ServerConfig
from modulepreload.core.ports.loader import ModuleLoader


def create_app(config: ServerConfig | None = None, loader: ModuleLoader | None = None) -> FastAPI:
    config = config or ServerConfig.from_env()

    app = FastAPI(
        title="Module Preload Server",
        description="Serve ES modules with their import graph as modulepreload link headers.",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config

    app.add_middleware(AllowAnyOriginMiddleware)

    # Health probes must be registered before the catch-all static mount
    app.include_router(health_router, include_in_schema=False)
    app.mount("/", ModulePreloadStaticFiles(config, loader), name="static")

    return app
