from __future__ import annotations

import contextlib
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from dotenv import load_dotenv

from persistence.errors import StoreError
from persistence.preferences_service import PreferencesService, create_preferences_service
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # Abort startup if the store is unusable.
    await app.state.preferences_service.initialize()
    yield


def create_app(
    settings: Settings | None = None,
    preferences_service: PreferencesService | None = None,
) -> FastAPI:
    load_dotenv("local.env")

    from endpoints.preferences_endpoints import router as preferences_router

    settings = settings or get_settings()
    if preferences_service is None:
        preferences_service = create_preferences_service(settings.config_base_dir)

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.preferences_service = preferences_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.debug_log_requests:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            response = await call_next(request)
            logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
            return response

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse({"error": "invalid preferences", "detail": exc.errors(include_url=False, include_context=False, include_input=False)}, status_code=400)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return JSONResponse({"error": type(exc).__name__, "detail": str(exc)}, status_code=500)

    app.include_router(preferences_router, prefix="/api/preferences")

    return app


app = create_app()
