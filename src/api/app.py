"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers table metadata
from src.api.error import ClientError, client_error_handler
from src.api.middleware import RequestLoggingMiddleware
from src.api.routes import companies, orders, payhere, subscriptions

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())


def create_app(config) -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.DB_AUTO_CREATE:
            engine = create_async_engine(config.DB_URI, echo=False, future=True)
            try:
                async with engine.begin() as conn:
                    await conn.run_sync(SQLModel.metadata.create_all)
            finally:
                await engine.dispose()
        yield

    app = FastAPI(
        title="Subscription Payment Service",
        description="PayHere order creation and payment notification handling",
        lifespan=lifespan,
    )

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(ClientError, client_error_handler)

    for module in (orders, payhere, companies, subscriptions):
        app.include_router(module.router, prefix=config.API_PREFIX)

    return app
