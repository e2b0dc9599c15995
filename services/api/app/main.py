"""FastAPI application entry point.

Multilingual MandiChallenge API - demo backend for agricultural vendors.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import datetime, timezone
import logging
import time

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.routes import api_router
from app.schemas import ErrorResponse, HealthResponse, NotFoundResponse, ServerInfo
from app.settings import get_settings
from app.stores.postgres import close_db, init_db, ping_db
from app.stores.redis import close_redis, init_redis

logger = logging.getLogger("uvicorn.error")

API_PREFIX = "/api/"
API_BASE_PATH = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events. Neither store is required by the
    demo endpoints, so connection failures are logged and startup continues.
    """
    # Startup
    settings = get_settings()

    try:
        await init_db()
        await ping_db()
        logger.info("Postgres connected")
    except Exception:
        logger.exception("Postgres init failed")

    try:
        await init_redis()
    except Exception:
        logger.exception("Redis init failed")

    logger.info(f"{settings.app_name} v{settings.app_version} running on port {settings.port}")
    logger.info(f"Environment: {settings.environment} (demo mode)")
    logger.info(f"API Base URL: http://localhost:{settings.port}{API_BASE_PATH}")

    yield

    # Shutdown
    await close_redis()
    await close_db()


def _server_info(version: str) -> ServerInfo:
    return ServerInfo(
        message="Multilingual MandiChallenge Demo Server",
        version=version,
        endpoints={
            "health": "/health",
            "priceSearch": f"{API_BASE_PATH}/price-discovery/search?q=rice",
            "languages": f"{API_BASE_PATH}/translation/languages",
            "translate": f"POST {API_BASE_PATH}/translation/translate",
            "login": f"POST {API_BASE_PATH}/auth/login",
            "register": f"POST {API_BASE_PATH}/auth/register",
        },
        demo_credentials={
            "note": "Any email/password combination will work for demo login",
            "examples": [
                {"email": "demo@example.com", "password": "password"},
                {"email": "vendor@mandi.com", "password": "123456"},
                {"email": "test@test.com", "password": "demo"},
            ],
        },
        note="This is a demo server. Frontend should be served separately using Vite.",
    )


def _api_not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content=NotFoundResponse().model_dump())


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Commodity prices, translation and vendor profiles for mandi traders (demo)",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware (credentials cannot be combined with a wildcard origin)
    allow_all = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.log_requests:

        @app.middleware("http")
        async def log_requests(
            request: Request,
            call_next: Callable[[Request], Awaitable[Response]],
        ) -> Response:
            """Access log: METHOD path -> status (ms)."""
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %s (%.1fms)",
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
            return response

    # Exception handlers for structured error format
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Unknown API routes (or methods) -> 404 JSON; everything else -> {success, error}."""
        if request.url.path.startswith(API_PREFIX) and exc.status_code in (404, 405):
            return _api_not_found()
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=str(exc.detail)).model_dump(exclude_none=True),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed bodies/params -> 400 with field details."""
        details = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content=jsonable_encoder(ErrorResponse(error="Validation failed", details=details)),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error=str(exc) if settings.debug else "Internal server error",
            ).model_dump(exclude_none=True),
        )

    # Health check endpoint
    @app.get("/health", tags=["health"], response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            timestamp=datetime.now(timezone.utc),
            service=settings.app_name,
            version=settings.app_version,
            message="Demo server running - databases not required",
        )

    # Include API routes
    app.include_router(api_router)

    # Catch-all must be registered last so it never shadows a real route.
    @app.get("/{full_path:path}", include_in_schema=False, response_model=None)
    async def server_info(full_path: str, request: Request) -> JSONResponse:
        """Server banner for non-API paths; unknown API paths get a JSON 404."""
        if request.url.path.startswith(API_PREFIX):
            return _api_not_found()
        return JSONResponse(content=_server_info(settings.app_version).model_dump(by_alias=True))

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
