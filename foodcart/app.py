import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from foodcart.core.config import Settings, get_settings
from foodcart.core.errors import AppError
from foodcart.core.responses import failure
from foodcart.repositories import build_repository
from foodcart.routers import auth as auth_router
from foodcart.routers import cart as cart_router
from foodcart.routers import catalog as catalog_router
from foodcart.services.auth_service import AuthService
from foodcart.services.cart_service import CartService

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path and response status."""

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error(request: Request, exc: AppError):
        return failure(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        return failure(400, "Request body must be a JSON object")

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return failure(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unexpected(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return failure(500, "Internal server error")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API. Storage is initialized here, so a StartupError aborts
    before any request is served. Compatible with `uvicorn --factory`.
    """
    settings = settings or get_settings()
    repository = build_repository(settings)
    repository.initialize()

    # interactive docs only outside production
    docs = settings.app_env != "prod"
    app = FastAPI(
        title="Food Cart API",
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.state.settings = settings
    app.state.repository = repository
    app.state.auth_service = AuthService(repository)
    app.state.cart_service = CartService(repository)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    _install_error_handlers(app)

    app.include_router(catalog_router.router)
    app.include_router(auth_router.router)
    app.include_router(cart_router.router)

    # API routes are matched first; everything else falls through to the assets
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    if settings.storage_backend == "json":
        logger.info("Data directory: %s", settings.data_dir)
    return app
