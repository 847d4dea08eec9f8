"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers tables on SQLModel.metadata
from src.api.error import register_exception_handlers
from src.api.middleware import RequestLoggingMiddleware
from src.api.routes import orders, products, reports

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(config) -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        sentry_sdk.init(dsn=config.DSN_SENTRY, environment=config.SENTRY_ENVIRONMENT)
        logger.info("Sentry error reporting enabled (%s)", config.SENTRY_ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_SCHEMA:
            from src.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database schema ready")
        yield

    app = FastAPI(
        title="Order Management API",
        version="1.0.0",
        description="Product catalog, orders, invoices and discount reporting",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(products.router, prefix=config.API_PREFIX)
    app.include_router(orders.router, prefix=config.API_PREFIX)
    app.include_router(reports.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
