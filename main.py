"""
FastAPI Application - Marketplace API
Users, products and categories backed by MongoDB
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api import categories, health, home, products, users
from app.core.config import config
from app.core.errors import register_exception_handlers
from app.core.logger import logger
from app.core.security import check_jwt_secret
from app.core.telemetry import instrument_app
from app.db.mongodb import Database
from app.middleware import RequestContextMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting Marketplace API...")
    check_jwt_secret()
    database = Database(config.mongodb_url, config.mongodb_database)
    await database.connect()
    app.state.database = database

    logger.info(
        "Marketplace API started successfully",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port,
        },
    )

    yield

    logger.info("Shutting down Marketplace API...")
    await database.close()
    app.state.database = None


def create_app() -> FastAPI:
    app = FastAPI(
        title="Marketplace API",
        description="User accounts, product listings and category lookups",
        version=config.service_version,
        lifespan=lifespan,
    )

    instrument_app(app)
    register_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)

    prefix = config.api_prefix
    app.include_router(health.router, tags=["health"])
    app.include_router(home.router, prefix=prefix, tags=["home"])
    app.include_router(users.router, prefix=f"{prefix}/users", tags=["users"])
    app.include_router(products.router, prefix=f"{prefix}/products", tags=["products"])
    app.include_router(categories.router, prefix=f"{prefix}/categories", tags=["categories"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting {config.service_name} on port {config.port}")

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.environment == "development",
    )
