"""ASGI entry point: `uvicorn colletro.main:app`.

create_app() assembles the API from the core modules (settings,
lifespan, error handlers, rate limiter) and the middleware package.
Settings are read when create_app() runs, not at import of the core
modules, so tests set their environment before importing this module.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from colletro.api.v1 import api_router
from colletro.core.config import Settings, get_settings
from colletro.core.exception_handlers import register_exception_handlers
from colletro.core.lifespan import create_lifespan
from colletro.core.limiter import limiter
from colletro.middleware import RequestIDMiddleware, TimeoutMiddleware

API_PREFIX = "/api/v1"


def _cors_origins(settings: Settings) -> list[str]:
    return [origin.strip() for origin in settings.allowed_origins.split(",") if origin.strip()]


def _add_middleware(app: FastAPI, settings: Settings) -> None:
    # add_middleware prepends, so the timeout wraps everything and CORS is innermost.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    # slowapi reads the limiter from app.state.
    app.state.limiter = limiter
    register_exception_handlers(app)
    _add_middleware(app, settings)
    app.include_router(api_router, prefix=API_PREFIX)
    return app


app = create_app()
