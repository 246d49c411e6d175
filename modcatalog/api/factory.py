"""
API Factory

Centralized application setup: middleware chain, routers, exception
handlers and monitoring.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from modcatalog.api.errors import register_exception_handlers
from modcatalog.api.middleware import (
    ClientAddressMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
    StaticAssetsMiddleware,
)
from modcatalog.api.pages import router as pages_router
from modcatalog.api.redirects import router as redirects_router
from modcatalog.api.router import router as api_router
from modcatalog.core.config import Settings, resolve_project_path, settings
from modcatalog.core.logger import get_logger
from modcatalog.stores.database import Database

logger = get_logger(__name__)


def setup_static_assets(app: FastAPI, config: Settings) -> None:
    """
    Serve ``public/`` (with ``.html`` fallback) and then ``built/``.

    Args:
        app: FastAPI application instance
        config: Settings providing the directories
    """
    directories = [
        (resolve_project_path(config.static__public_dir), True),
        (resolve_project_path(config.static__built_dir), False),
    ]
    app.add_middleware(StaticAssetsMiddleware, directories=directories)
    logger.info("Static assets served from: %s", ", ".join(str(d) for d, _ in directories))


def setup_compression(app: FastAPI) -> None:
    """
    Setup response compression middleware.

    Args:
        app: FastAPI application instance
    """
    # Enable GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    logger.info("GZip compression middleware configured")


def setup_security_headers(app: FastAPI, config: Settings) -> None:
    app.add_middleware(
        SecurityHeadersMiddleware,
        script_src=config.security_script_src_list,
        hsts_max_age=config.security__hsts_max_age,
    )
    logger.info("Security headers middleware configured")


def setup_cors(app: FastAPI, config: Settings) -> None:
    """
    Setup CORS middleware with configurable origins.

    Args:
        app: FastAPI application instance
        config: Settings providing the CORS lists
    """
    cors_origins = config.cors_allow_origins_list
    cors_methods = config.cors_allow_methods_list
    cors_headers = config.cors_allow_headers_list

    if cors_origins and cors_origins != [""]:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_methods=cors_methods,
            allow_headers=cors_headers,
        )
        logger.info("CORS middleware configured:")
        logger.info("  Origins: %s", cors_origins)
        logger.info("  Methods: %s", cors_methods)
        logger.info("  Headers: %s", cors_headers)
    else:
        logger.info("CORS middleware skipped (no origins configured)")


def setup_logging_middleware(app: FastAPI) -> None:
    app.add_middleware(RequestLoggingMiddleware)
    logger.info("Request logging middleware configured")


def setup_client_address(app: FastAPI, config: Settings) -> None:
    """
    Resolve client addresses through trusted proxies.

    Args:
        app: FastAPI application instance
        config: Settings providing ``TRUST_PROXY``
    """
    trust_proxy = config.trust_proxy_setting
    app.add_middleware(ClientAddressMiddleware, trust_proxy=trust_proxy)
    logger.info("Client address middleware configured (trust proxy: %r)", trust_proxy)


def setup_logfire_instrumentation(app: FastAPI, database: Database) -> None:
    """
    Setup Logfire configuration and library instrumentation.

    Args:
        app: FastAPI application instance
        database: Database whose engine gets SQLAlchemy instrumentation
    """
    try:
        from modcatalog.core.logfire_config import initialize_logfire

        results = initialize_logfire(app, database.engine)

        if results["configured"]:
            logger.info("Logfire initialized successfully")

            instrumentation = results["instrumentation"]
            enabled_instruments = [
                name for name, enabled in instrumentation.items() if enabled
            ]
            if enabled_instruments:
                logger.info(
                    "Logfire instrumentation enabled for: %s",
                    ", ".join(enabled_instruments),
                )
            else:
                logger.debug("No Logfire instrumentation enabled")
        else:
            logger.debug("Logfire initialization skipped (disabled or not available)")

    except ImportError:
        logger.debug("Logfire not available for instrumentation")
    except Exception as e:
        logger.warning("Failed to initialize Logfire: %s", e)


def create_api(
    database: Optional[Database] = None,
    config: Optional[Settings] = None,
    mount_prefix: str = "/api",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Request processing order, outermost first: client address, request
    logging, CORS, security headers, compression, static assets, then the
    routes (API, pages, redirect lookup).

    Args:
        database: Database handle; created from settings when omitted
        config: Settings instance; the global settings when omitted
        mount_prefix: Prefix for mounting the API router

    Returns:
        Configured FastAPI application
    """
    config = config or settings
    database = database or Database.from_settings(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        database.dispose()
        logger.info("Database connections released")

    app = FastAPI(
        title=config.api__title,
        description=config.api__description,
        version=config.api__version,
        docs_url=config.api__docs_url,
        redoc_url=config.api__redoc_url,
        debug=config.debug,
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.settings = config

    # Setup middleware in reverse order (last added = first executed)
    setup_static_assets(app, config)
    setup_compression(app)
    setup_security_headers(app, config)
    setup_cors(app, config)
    setup_logging_middleware(app)
    setup_client_address(app, config)

    register_exception_handlers(app)
    logger.info("Global exception handlers configured")

    setup_logfire_instrumentation(app, database)

    app.include_router(api_router, prefix=mount_prefix)
    app.include_router(pages_router)
    # Catch-all; must stay last
    app.include_router(redirects_router)

    logger.info("API factory created: %s v%s", config.api__title, config.api__version)
    return app


__all__ = ["create_api"]
