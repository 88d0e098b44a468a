# app/bootstrap.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import event_repository_error_handler
from app.api.router import api_router
from app.core.config import Settings, settings
from app.core.errors import EventRepositoryError
from app.core.logging import setup_logging
from app.core.middleware import RequestLoggingMiddleware


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_json)

    app = FastAPI(title=app_settings.app_name)
    app.state.settings = app_settings

    # -------------------------
    # Middleware
    # -------------------------
    app.add_middleware(RequestLoggingMiddleware)

    origins = [o.strip() for o in app_settings.cors_allow_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins if origins else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(EventRepositoryError, event_repository_error_handler)

    # -------------------------
    # Routers
    # -------------------------
    app.include_router(api_router, prefix=app_settings.api_prefix)

    # -------------------------
    # Health
    # -------------------------
    @app.get("/health/live", tags=["health"])
    def live():
        return {"status": "alive"}

    @app.get("/health/ready", tags=["health"])
    def ready():
        ready = getattr(app.state, "event_repo", None) is not None
        return {"status": "ready" if ready else "degraded"}

    # -------------------------
    # Root
    # -------------------------
    @app.get("/", tags=["root"])
    def root():
        return {
            "message": "Hello World",
            "service": app_settings.app_name,
            "api_prefix": app_settings.api_prefix,
        }

    return app
