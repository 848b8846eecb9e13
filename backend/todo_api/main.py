# FastAPI entrypoint
# - create_app(): builds the app around an injected UserService
# - error envelope handlers (validation errors, AppError, unexpected errors)
# - CORS settings, health check, API v1 routers
#
# Run locally: uvicorn todo_api.main:app --app-dir backend --reload

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.exceptions import AppError, InternalServerError, InvalidRequestError, UserServiceError
from .core.security import get_current_user
from .api.v1.users import build_user_router
from .repositories.user_repository import InMemoryUserRepository
from .services.user_service import InMemoryUserService, UserService

logger = logging.getLogger(__name__)


def format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = InvalidRequestError(format_validation_errors(exc))
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, UserServiceError):
        logger.warning("%s %s rejected by user service: %s (%s)",
                       request.method, request.url.path, exc.error_key, exc.log)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed", request.method, request.url.path)
    error = InternalServerError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def create_app(
    user_service: Optional[UserService] = None,
    authenticate: Callable[..., Any] = get_current_user,
) -> FastAPI:
    app = FastAPI(
        title="Todo Users API",
        description="User registration, login and management",
        version="1.0.0"
    )
    # UserService collaborator; the in-memory store is the local default
    app.state.user_service = user_service or InMemoryUserService(InMemoryUserRepository())

    origins = [o.strip() for o in settings.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    @app.get("/")
    async def root():
        return {"ok": True, "app": settings.APP_NAME, "time": datetime.now(tz=timezone.utc).isoformat()}

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "app": settings.APP_NAME, "version": app.version}

    app.include_router(build_user_router(authenticate), prefix=settings.API_PREFIX)
    return app


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# module-level app for uvicorn; the only place global logging is configured
configure_logging()
app = create_app()
