"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from car_doctor.api.auth import router as auth_router
from car_doctor.api.bookings import router as bookings_router
from car_doctor.api.catalog import router as catalog_router
from car_doctor.app_logging import configure_logging
from car_doctor.config import parse_cors_origins
from car_doctor.containers import AppContainer
from car_doctor.domain.errors import (
    ForbiddenError,
    InvalidClaimsError,
    NotFoundError,
    StorageUnavailableError,
    UnauthenticatedError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.check_storage()
        except StorageUnavailableError:
            logger.exception("Storage connectivity check failed")
            raise
        logger.info("Storage connectivity check passed")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(UnauthenticatedError)
    async def unauthenticated_handler(
        request: Request, exc: UnauthenticatedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": "Not Authorized"},
        )

    @app.exception_handler(ForbiddenError)
    async def forbidden_handler(request: Request, exc: ForbiddenError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": "Forbidden Access"},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(InvalidClaimsError)
    async def invalid_claims_handler(
        request: Request, exc: InvalidClaimsError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(StorageUnavailableError)
    async def storage_handler(
        request: Request, exc: StorageUnavailableError
    ) -> JSONResponse:
        logger.error("Storage failure on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage unavailable"},
        )

    app.include_router(auth_router)
    app.include_router(catalog_router)
    app.include_router(bookings_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Banner endpoint."""
        return "Car doctor server is running"

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
