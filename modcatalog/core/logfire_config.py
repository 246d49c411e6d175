"""
Logfire Configuration Module

Logfire monitoring and instrumentation setup for modcatalog.

Usage:
    from modcatalog.core.logfire_config import initialize_logfire

    results = initialize_logfire(app, engine)  # idempotent
    # results: {"configured": bool, "instrumentation": {...}}
"""

import logging
from typing import Any, Dict, Optional

import logfire
from fastapi import FastAPI
from sqlalchemy import Engine

from modcatalog.core.config import settings
from modcatalog.core.logger import setup_logfire_handler

_configured = False


def setup_logfire() -> bool:
    """
    Set up basic logfire configuration.

    Returns:
        bool: True if logfire is configured, False otherwise
    """
    global _configured
    logger = logging.getLogger("modcatalog.logfire")

    if not settings.logfire__enabled or _configured:
        return _configured

    try:
        config_kwargs: Dict[str, Any] = {
            "service_name": settings.logfire__service_name,
            "environment": settings.logfire__environment,
        }
        if settings.logfire__token:
            config_kwargs["token"] = settings.logfire__token.get_secret_value()

        logfire.configure(**config_kwargs)
        logging.getLogger("modcatalog.startup").info(
            "Logfire initialized for service: %s", settings.logfire__service_name
        )

        setup_logfire_handler()
        _configured = True
        return True

    except Exception as e:
        logger.error("Failed to initialize logfire: %s", e)
        return False


def instrument_fastapi(app: FastAPI) -> bool:
    """Instrument a FastAPI application with logfire spans."""
    logger = logging.getLogger("modcatalog.logfire")

    if not settings.logfire__enabled or not settings.logfire__instrument__fastapi:
        return False

    try:
        logfire.instrument_fastapi(app, capture_headers=True)
        logger.info("FastAPI instrumented with logfire")
        return True
    except Exception as e:
        logger.error("Failed to instrument FastAPI with logfire: %s", e)
        return False


def instrument_sqlalchemy(engine: Engine) -> bool:
    """Instrument the SQLAlchemy engine backing the catalog."""
    logger = logging.getLogger("modcatalog.logfire")

    if not settings.logfire__enabled or not settings.logfire__instrument__sqlalchemy:
        return False

    try:
        logfire.instrument_sqlalchemy(engine=engine)
        logger.info("SQLAlchemy instrumented with logfire")
        return True
    except Exception as e:
        logger.warning("Failed to instrument SQLAlchemy with logfire: %s", e)
        return False


def initialize_logfire(
    app: Optional[FastAPI] = None, engine: Optional[Engine] = None
) -> Dict[str, Any]:
    """
    Complete logfire initialization including configuration and instrumentation.

    Args:
        app: Optional FastAPI application instance for instrumentation
        engine: Optional SQLAlchemy engine for instrumentation

    Returns:
        dict: Initialization results with status for each component
    """
    results: Dict[str, Any] = {
        "configured": False,
        "instrumentation": {"fastapi": False, "sqlalchemy": False},
    }

    results["configured"] = setup_logfire()

    if results["configured"]:
        if app is not None:
            results["instrumentation"]["fastapi"] = instrument_fastapi(app)
        if engine is not None:
            results["instrumentation"]["sqlalchemy"] = instrument_sqlalchemy(engine)

    return results
