"""
Database Core

SQLAlchemy engine and session management for modcatalog.

The ``Database`` object is the shared handle passed to every entity wrapper
and store. It owns one engine (and its connection pool) plus a session
factory; nothing else in the application holds connections.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Generator, Optional

from sqlalchemy import Engine, create_engine, event, make_url, text
from sqlalchemy.exc import (
    DatabaseError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from modcatalog.core.config import Settings, settings
from modcatalog.core.error_codes import DatabaseErrorCode
from modcatalog.core.exceptions import DatabaseException
from modcatalog.core.logger import get_logger

if TYPE_CHECKING:
    from modcatalog.stores.mod_store import ModStore
    from modcatalog.stores.redirect_store import RedirectStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class PoolStatus:
    """Immutable connection pool status information."""

    size: int
    checked_out: int
    overflow: int


# Global SQLAlchemy base
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _create_database_engine(
    url: str,
    *,
    echo: bool = False,
    pool_size: int = 10,
    max_overflow: int = 20,
    pool_timeout: int = 30,
    pool_recycle: int = 3600,
    pool_pre_ping: bool = True,
) -> Engine:
    """Create and configure the database engine."""
    try:
        url_obj = make_url(url)

        if url_obj.get_backend_name() == "sqlite":
            kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
            # In-memory databases live inside a single connection
            if url_obj.database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
            db_engine = create_engine(url, echo=echo, **kwargs)
            event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)
            return db_engine

        return create_engine(
            url,
            echo=echo,
            pool_pre_ping=pool_pre_ping,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_recycle=pool_recycle,
            poolclass=QueuePool,
        )

    except Exception as e:
        logger.error("Failed to create database engine: %s", str(e))

        if "@" in url:
            host = url.rsplit("@", maxsplit=1)[-1].split("/")[0]
        else:
            host = "unknown"

        raise DatabaseException(
            f"Database engine creation failed: {str(e)}",
            DatabaseErrorCode.CONNECTION_FAILED,
            details={"database_url_host": host},
        ) from e


class Database:
    """Shared database handle: engine, session factory and catalog stores."""

    def __init__(self, url: str, **engine_options: Any) -> None:
        self.url = url
        self.engine = _create_database_engine(url, **engine_options)
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=True,
        )
        self._mods: Optional["ModStore"] = None
        self._redirects: Optional["RedirectStore"] = None

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "Database":
        config = config or settings
        return cls(
            config.database__url,
            echo=config.database__echo,
            pool_size=config.database__pool_size,
            max_overflow=config.database__max_overflow,
            pool_timeout=config.database__pool_timeout,
            pool_recycle=config.database__pool_recycle,
            pool_pre_ping=config.database__pool_pre_ping,
        )

    @property
    def mods(self) -> "ModStore":
        if self._mods is None:
            from modcatalog.stores.mod_store import ModStore

            self._mods = ModStore(self)
        return self._mods

    @property
    def redirects(self) -> "RedirectStore":
        if self._redirects is None:
            from modcatalog.stores.redirect_store import RedirectStore

            self._redirects = RedirectStore(self)
        return self._redirects

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for a database session.

        SQLAlchemy failures are rolled back and re-raised as DatabaseException;
        any other exception is rolled back and propagates unchanged.

        Example:
            with database.session() as db:
                db.execute(delete(ModRecord).where(ModRecord.id == mod_id))
                db.commit()
        """
        db_session = self.SessionLocal()
        logger.debug("Database session created")
        try:
            yield db_session

        except SQLAlchemyError as e:
            logger.error("Database session error: %s", str(e))
            self._rollback(db_session)
            raise DatabaseException(
                f"Database session error: {str(e)}",
                DatabaseErrorCode.QUERY_FAILED,
            ) from e

        except Exception:
            self._rollback(db_session)
            raise

        finally:
            try:
                db_session.close()
                logger.debug("Database session closed")
            except SQLAlchemyError as close_error:
                logger.error("Failed to close database session: %s", str(close_error))

    @staticmethod
    def _rollback(db_session: Session) -> None:
        try:
            db_session.rollback()
            logger.debug("Database session rolled back due to error")
        except SQLAlchemyError as rollback_error:
            logger.error("Failed to rollback session: %s", str(rollback_error))

    def create_tables(self) -> None:
        """Create all catalog tables that do not exist yet."""
        # Importing the models registers them on Base.metadata
        import modcatalog.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created")

    def get_pool_status(self) -> PoolStatus:
        """
        Get current connection pool status.

        Pools without size accounting (sqlite's StaticPool) report zeros.
        """
        pool = self.engine.pool
        return PoolStatus(
            size=getattr(pool, "size", lambda: 0)(),
            checked_out=getattr(pool, "checkedout", lambda: 0)(),
            overflow=getattr(pool, "overflow", lambda: 0)(),
        )

    def test_connection(self) -> Dict[str, Any]:
        """
        Test database connection and return status information.

        Raises:
            DatabaseException: If connection test fails
        """
        try:
            with self.engine.connect() as conn:
                test_value = conn.execute(text("SELECT 1 as test_value")).scalar()

            pool_status = self.get_pool_status()
            logger.info(
                "Database connection test - Pool status: Size=%d, Checked out=%d, "
                "Overflow=%d",
                pool_status.size,
                pool_status.checked_out,
                pool_status.overflow,
            )

            return {
                "connection_test": "passed",
                "test_query_result": test_value,
                "pool_status": {
                    "size": pool_status.size,
                    "checked_out": pool_status.checked_out,
                    "overflow": pool_status.overflow,
                },
                "engine_url": self.engine.url.render_as_string(hide_password=True),
            }

        except (OperationalError, DatabaseError, InterfaceError) as e:
            logger.error("Database connection test failed: %s", str(e))
            raise DatabaseException(
                f"Database connection test failed: {str(e)}",
                DatabaseErrorCode.CONNECTION_FAILED,
                details={"error_type": type(e).__name__},
            ) from e

    def dispose(self) -> None:
        """Dispose the engine and close all pooled connections."""
        try:
            self.engine.dispose()
            logger.info("Database engine disposed successfully")
        except SQLAlchemyError as e:
            logger.error("Failed to dispose database engine: %s", str(e))


__all__ = ["Base", "Database", "PoolStatus"]
