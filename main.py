"""
modcatalog - Main Entry Point

Runs the API server or initializes the database schema.
"""

import argparse
import os
import sys

from fastapi import FastAPI

from modcatalog.core.config import settings


def create_app() -> FastAPI:
    """
    Factory function to create FastAPI application.

    This function is called by uvicorn in factory mode so that the database
    engine is created in the serving process.

    Returns:
        FastAPI: Configured application instance
    """
    from modcatalog.api.factory import create_api
    from modcatalog.core.logger import setup_logging

    # Setup logging first
    setup_logging()
    return create_api(config=settings)


def init_database() -> None:
    """Test the connection and create every table."""
    from modcatalog.core.logger import get_logger, setup_logging
    from modcatalog.stores.database import Database

    setup_logging()
    logger = get_logger(__name__)

    database = Database.from_settings(settings)
    try:
        logger.info("Testing database connection...")
        logger.info("Database connection test passed: %s", database.test_connection())
        database.create_tables()
        logger.info("Database initialization completed successfully")
    finally:
        database.dispose()


def main() -> None:
    """
    Main entry point with CLI argument parsing.
    """
    parser = argparse.ArgumentParser(
        description="modcatalog - mod catalog web service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                     # Run the API server (default)
  python main.py --mode init-db      # Create database tables
  python main.py --host 127.0.0.1 --port 3000  # Custom host/port
        """,
    )

    parser.add_argument(
        "--mode",
        choices=["api", "init-db"],
        default="api",
        help="Run mode: 'api' for the web server, 'init-db' to create tables (default: api)",
    )

    parser.add_argument(
        "--host",
        default=os.getenv("HOST", "0.0.0.0"),
        help="Host to bind the API server (default: 0.0.0.0)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8080")),
        help="Port to bind the API server (default: 8080)",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development (API mode only)",
    )

    args = parser.parse_args()

    if args.mode == "init-db":
        try:
            init_database()
        except Exception as e:
            print(f"❌ Database initialization failed: {e}")
            sys.exit(1)
        return

    print("🚀 Starting modcatalog API Server...")
    print(f"📍 Server will run on {args.host}:{args.port}")
    print(f"🌍 Environment: {settings.environment}")
    print(f"🐛 Debug mode: {settings.debug}")
    print(f"📚 API docs: http://{args.host}:{args.port}{settings.api__docs_url}")
    print()

    try:
        import uvicorn

        uvicorn.run(
            "main:create_app",
            factory=True,
            host=args.host,
            port=args.port,
            reload=args.reload or settings.debug,
            log_level=str(settings.log_level).lower(),
        )
    except Exception as e:
        print(f"❌ Error starting API server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
