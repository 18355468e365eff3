from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import storefront.config as config
from storefront.api.middleware import AppContextMiddleware, RequestLoggingMiddleware
from storefront.api.routers import product_router, user_router, transaction_router
from storefront.data.db.connection import db_connection
from storefront.data.seed import init_db


@asynccontextmanager
async def lifespan(_: FastAPI):
    from storefront.api import api_logger as logger

    logger.info(f"Storefront API starting on {config.API_HOST}:{config.API_PORT}")
    await init_db(seed=config.SEED_CATALOG)

    yield

    logger.info("Storefront API shutting down...")
    await db_connection.close()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        description="Catalog, login, sign-up and purchase endpoints for the storefront demo",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it wraps the logging middleware and sets its logger
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(AppContextMiddleware)

    app.include_router(product_router)
    app.include_router(user_router)
    app.include_router(transaction_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
