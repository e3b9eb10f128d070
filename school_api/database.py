from typing import Any, AsyncGenerator, Optional

import structlog
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from school_api.exceptions import (
    ConfigurationError,
    DatabaseConnectionError,
    MigrationError,
    SchoolApiException,
)

logger = structlog.get_logger()

# DB_TYPE value -> async SQLAlchemy driver
DRIVERS = {
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
    "mysql": "mysql+aiomysql",
    "sqlite": "sqlite+aiosqlite",
}


class Base(DeclarativeBase):
    pass


def build_database_url(
    db_type: str,
    user: str,
    password: str,
    host: str,
    port: Optional[int | str],
    name: str,
) -> URL:
    """Build an async SQLAlchemy URL for the configured database kind.

    For sqlite the database name is the file path and the network fields are
    ignored.

    Raises:
        ConfigurationError: If the database kind is not supported or the
            port is not a number
    """
    drivername = DRIVERS.get(db_type.strip().lower())
    if drivername is None:
        raise ConfigurationError(
            f"Unsupported database type '{db_type}'", field="DB_TYPE"
        )

    if drivername.startswith("sqlite"):
        return URL.create(drivername, database=name)

    try:
        port_number = int(port) if port not in (None, "") else None
    except ValueError as e:
        raise ConfigurationError(f"Invalid database port '{port}'", field="DB_PORT") from e

    return URL.create(
        drivername,
        username=user or None,
        password=password or None,
        host=host or None,
        port=port_number,
        database=name,
    )


class Database:
    """Handle on a configured database: engine plus session factory.

    Passed explicitly to the application instead of living in module state.
    """

    def __init__(self, url: str | URL, echo: bool = False, **engine_kwargs: Any):
        self.engine = create_async_engine(url, echo=echo, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    def session(self) -> AsyncSession:
        return self.session_factory()

    async def verify_connection(self) -> None:
        async with self.engine.connect() as conn:
            await conn.scalar(text("SELECT 1"))

    async def auto_migrate(self) -> None:
        """Create tables for every model registered on ``Base.metadata``.

        Raises:
            MigrationError: If the schema cannot be created
        """
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.critical("Database migration failed", error=str(e))
            raise MigrationError(f"Failed to migrate database: {e}") from e

        logger.info("Database schema migrated", tables=sorted(Base.metadata.tables))

    async def dispose(self) -> None:
        await self.engine.dispose()


async def open_database(url: URL, echo: bool = False) -> Database:
    """Create a Database for `url` and check that it answers.

    Raises:
        DatabaseConnectionError: If the database cannot be reached
    """
    database = Database(url, echo=echo)

    try:
        await database.verify_connection()
    except (SQLAlchemyError, OSError) as e:
        await database.dispose()
        logger.critical(
            "Failed to connect database",
            driver=url.drivername,
            host=url.host,
            database=url.database,
            error=str(e),
        )
        raise DatabaseConnectionError(f"Failed to connect database: {e}") from e

    logger.info(
        "Connected to database",
        driver=url.drivername,
        host=url.host,
        database=url.database,
    )
    return database


async def connect_database(
    db_type: str,
    user: str,
    password: str,
    host: str,
    port: Optional[int | str],
    name: str,
    echo: bool = False,
) -> Database:
    """Open and verify a connection to the configured database.

    Args:
        db_type: Database kind (postgres, mysql or sqlite)
        user: Database user
        password: Database password
        host: Database host
        port: Database port
        name: Database name, or file path for sqlite
        echo: Log every SQL statement

    Returns:
        Database: A handle whose connection has been verified

    Raises:
        ConfigurationError: If the database kind or port is invalid
        DatabaseConnectionError: If the database cannot be reached
    """
    url = build_database_url(db_type, user, password, host, port, name)
    return await open_database(url, echo=echo)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise DatabaseConnectionError("Database is not initialised")

    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except SchoolApiException:
            await session.rollback()
            raise
        except Exception as e:
            await session.rollback()
            logger.error("Database session error", error=str(e))
            raise
