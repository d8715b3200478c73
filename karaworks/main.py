import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from karaworks import __version__
from karaworks.core.config import get_settings
from karaworks.infrastructure.database import init_db
from karaworks.interfaces.http.routers import create_api_router

settings = get_settings()

logging.basicConfig(level=settings.logging.level, format=settings.logging.format)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s %s (%s)", settings.project_name, __version__, settings.environment)
    await init_db()
    yield


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"{location}: {errors[0].get('msg')}" if location else errors[0].get("msg")
    else:
        message = "Invalid request"
    return JSONResponse({"error": message}, status_code=400)


async def store_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Gig-work marketplace backend: events, applications and worker payouts",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, store_exception_handler)

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/healthz", tags=["System"])
    async def healthz() -> dict[str, str]:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


app = create_app()
