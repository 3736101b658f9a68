# talord/main.py
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from talord import __version__
from talord.adapters.api.routers import health, numerals
from talord.core.domain.exceptions import DomainError
from talord.shared.config import AppEnv, settings
from talord.shared.logging_setup import init_logging

logger = structlog.get_logger()


def _error_body(code: int, message: str) -> dict:
    return {"status": "error", "code": code, "message": message}


def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    init_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Danish compound numeral names for integers and decimals",
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url="/redoc" if settings.APP_ENV != AppEnv.PRODUCTION else None,
    )

    origins = ["*"] if settings.DEBUG else []
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Global Exception Handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.status_code, str(exc.detail)),
        )

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        logger.error("domain_error", path=request.url.path, error=str(exc))
        message = str(exc) if settings.DEBUG else "Internal Server Error"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(500, message),
        )

    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(numerals.router, prefix=settings.API_PREFIX)

    logger.info("app_created", env=settings.APP_ENV.value, prefix=settings.API_PREFIX)
    return app


# Entry point for Uvicorn
app = create_app()
