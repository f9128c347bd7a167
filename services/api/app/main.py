"""FastAPI application entry point.

Frontpage API - vote-weighted, time-decayed article rankings.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError, ResponseError

from app.routes import api_router
from app.schemas import ErrorDetail, ErrorResponse
from app.settings import get_settings
from app.stores.redis import init_redis, close_redis

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Initialize Redis (requests fail with 503 until it is reachable)
    try:
        await init_redis()
    except Exception:
        logger.exception("Redis init failed")

    yield

    await close_redis()


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Vote-weighted, time-decayed article rankings",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RedisError)
    async def store_exception_handler(request: Request, exc: RedisError) -> JSONResponse:
        """Store failures are not retried; surface them as 503."""
        logger.error(f"Redis call failed on {request.url.path}: {exc!r}")
        return _error(
            503,
            "STORE_UNAVAILABLE",
            str(exc) if settings.debug else "Store unavailable",
        )

    @app.exception_handler(ResponseError)
    async def store_command_exception_handler(request: Request, exc: ResponseError) -> JSONResponse:
        """Redis is reachable but rejected the command."""
        logger.error(f"Redis command failed on {request.url.path}: {exc!r}")
        return _error(
            500,
            "STORE_OPERATION_FAILED",
            str(exc) if settings.debug else "Store operation failed",
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        return _error(
            500,
            "INTERNAL_ERROR",
            str(exc) if settings.debug else "Internal server error",
        )

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
