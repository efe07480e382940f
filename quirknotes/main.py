"""
FastAPI Application Entry Point.

create_app() wires configuration, the token service, middleware, exception
handlers, and routes. The database engine is opened in the lifespan and
disposed on shutdown; nothing holds a module-level connection.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quirknotes.api import health
from quirknotes.api import router as api_router
from quirknotes.core.config import get_app_config, get_database_url
from quirknotes.core.database import create_engine, create_session_factory, create_tables
from quirknotes.core.exception_handlers import register_exception_handlers
from quirknotes.core.logging import get_logger, setup_logging
from quirknotes.core.middleware import RequestContextMiddleware
from quirknotes.core.security import TokenService

logger = get_logger(__name__)

_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the database on startup and release it on shutdown."""
    app_config = get_app_config()
    setup_logging()

    database_url = app.state.database_url or get_database_url()
    engine = create_engine(database_url, app_config.database)
    if app_config.database.create_tables:
        await create_tables(engine)
    app.state.session_factory = create_session_factory(engine)

    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "env": app_config.application.environment,
        },
    )
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("Application shutting down")


def create_app(
    token_service: TokenService | None = None,
    database_url: str | None = None,
    bcrypt_rounds: int | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        token_service: Token signer/verifier; built from config when omitted
        database_url: Async SQLAlchemy URL; built from config when omitted
        bcrypt_rounds: Password work factor; read from security.yaml when omitted
    """
    app_config = get_app_config()
    app_settings = app_config.application

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )

    app.state.token_service = token_service or TokenService.from_config()
    app.state.database_url = database_url
    app.state.bcrypt_rounds = (
        bcrypt_rounds if bcrypt_rounds is not None
        else app_config.security.password.bcrypt_rounds
    )

    app.add_middleware(RequestContextMiddleware)

    if app_settings.cors.origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors.origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router)

    return app


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    Creates the app on first call and caches it, so importing this module
    does not require config/.env to be present.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn quirknotes.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
