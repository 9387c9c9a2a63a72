"""Database engine and session factory used across the application."""

from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.catalog_api.runtime.config.config_data import ConfigData
from src.catalog_api.runtime.context import get_config


def build_engine(config: ConfigData) -> Engine:
    """Create the SQLAlchemy engine described by ``config.database``."""
    db_config = config.database
    engine_kwargs: dict[str, Any] = {
        "echo": db_config.echo,
        "connect_args": _get_connect_args(config),
    }

    if db_config.is_sqlite:
        if make_url(db_config.url).database in (None, "", ":memory:"):
            # One shared connection, otherwise every checkout sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        if config.app.environment == "production":
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )
    else:
        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,
            }
        )

    url = make_url(db_config.connection_string)
    if url.drivername == "postgresql":
        # Driverless URLs use psycopg2
        url = url.set(drivername="postgresql+psycopg2")

    return create_engine(url, **engine_kwargs)


def _get_connect_args(config: ConfigData) -> dict:
    """Get database-specific connection arguments."""
    if config.database.is_sqlite:
        # Sessions are used from FastAPI's threadpool
        return {"check_same_thread": False, "timeout": 20}

    if make_url(config.database.url).get_backend_name() == "postgresql":
        return {
            "application_name": f"{config.app.name}_{config.app.environment}",
            "connect_timeout": 30,
        }

    return {}


class DbSessionService:
    """Owns the shared engine and hands out sessions bound to it."""

    def __init__(self, engine: Engine | None = None):
        main_config = get_config()
        if engine is None:
            logger.info(
                "Configuring database engine for environment: {}",
                main_config.app.environment,
            )
            engine = build_engine(main_config)
        self._engine = engine

        logger.bind(
            backend=self._engine.url.get_backend_name(),
            pool=type(self._engine.pool).__name__,
        ).info("Database engine initialized")

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__, error_message=str(e)).error(
                "Database health check failed"
            )
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "type": type(pool).__name__,
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
        logger.info("Database engine disposed")
