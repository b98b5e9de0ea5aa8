from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from api.homepage import router as homepage_router
from api.middleware import LoggingMiddleware
from api.url_endpoints import router, redirect_router
from config import settings
from database import init_db
from logging_config import get_logger, setup_logging


logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)
    logger.info("Creating tables")
    init_db()
    yield
    logger.info("Shutting down")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    # Details stay in the server log
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="A small URL shortening service",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_middleware(LoggingMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    # Order matters: redirect_router has /{mapping_id} which catches everything
    app.include_router(homepage_router)
    app.include_router(router)
    app.include_router(redirect_router)
    return app


app = create_app()


def run() -> None:
    """Start the service on HOST:PORT"""
    setup_logging(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)
    logger.info(f"Listening on {settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
