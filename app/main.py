import sentry_sdk
import structlog
from fastapi import FastAPI
from sentry_sdk.integrations.starlette import StarletteIntegration

from app.api import errors
from app.api.routers.healthz import router as healthz_router
from app.api.routers.places import router as places_router
from app.core.config import Settings, get_settings
from app.logging import setup_logging
from app.middleware.request_id import request_id_middleware


def create_app(settings: Settings | None = None) -> FastAPI:
    """Composition root: logging, Sentry, error dispatch, middleware and routers."""
    settings = settings or get_settings()

    # Initialize structured logging first
    setup_logging(level=settings.log_level, log_format=settings.resolved_log_format)

    # Initialize Sentry (no-op if DSN is missing)
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.app_env,
            release=settings.release,
            integrations=[StarletteIntegration()],
            traces_sample_rate=settings.sentry_traces_rate,
            send_default_pii=False,
        )

    app = FastAPI(title="Places API")

    # Error dispatch must sit inside the request-id middleware so that
    # error responses are access-logged and carry X-Request-ID
    errors.install(app)
    app.middleware("http")(request_id_middleware)

    app.include_router(places_router)
    app.include_router(healthz_router)

    # Debug-only endpoint to raise an unclassified error (disabled in prod)
    if not settings.is_prod:

        @app.get("/debug/error", include_in_schema=False)
        def debug_error():
            raise RuntimeError("intentional error for error dispatch debug")

    structlog.get_logger(__name__).info("app_startup", env=settings.app_env)
    return app


app = create_app()
