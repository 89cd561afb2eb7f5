import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from thumbnail_generator.api.routes import router as api_router
from thumbnail_generator.config import Settings, get_settings
from thumbnail_generator.logging_config import configure_logging
from thumbnail_generator.services.freepik_service import FreepikService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    freepik_service = FreepikService(settings.freepik_config(), client=http_client)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await freepik_service.aclose()

    app = FastAPI(title="Thumbnail Generator", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.freepik_service = freepik_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"detail": jsonable_errors(exc)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app


def jsonable_errors(exc: RequestValidationError):
    # ctx may hold exception instances that JSONResponse cannot encode
    return [{key: value for key, value in error.items() if key != "ctx"} for error in exc.errors()]


app = create_app()

