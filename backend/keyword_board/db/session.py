"""
Database Session Management Module

Provides the process-owned database handle and the per-request session dependency.
Supports SQLite and PostgreSQL.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from keyword_board.common.errors import InfrastructureError
from keyword_board.config import Settings, get_settings
from keyword_board.db.models import Base

logger = logging.getLogger(__name__)


class Database:
    """
    Database Handle

    Owns the async engine and session factory. Created once by the application
    lifespan and shared by all requests. The schema is created on the first
    successful `connect()`; later calls are no-ops.
    """

    def __init__(
        self,
        url: str,
        echo: bool = False,
        connect_args: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize Database Handle

        Args:
            url: SQLAlchemy async connection URL
            echo: Print SQL statements
            connect_args: Driver specific connection arguments
        """
        self.url = url
        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            connect_args=connect_args or {},
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Do not expire objects after commit, avoids extra queries
            autocommit=False,
            autoflush=False,
        )
        self._connected = False
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Database":
        """Build a handle from application settings"""
        settings = settings or get_settings()
        return cls(
            settings.DATABASE_URL,
            echo=settings.DEBUG,
            # SQLite specific configuration
            connect_args={"check_same_thread": False}
            if settings.DATABASE_TYPE == "sqlite"
            else {},
        )

    @property
    def connected(self) -> bool:
        return self._connected

    async def connect(self) -> None:
        """
        Connect and create tables if not done yet

        Raises:
            InfrastructureError: Database unreachable or schema creation failed
        """
        if self._connected:
            return
        async with self._lock:
            if self._connected:
                return
            logger.info("Connecting to database...")
            try:
                async with self.engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
            except (SQLAlchemyError, OSError) as exc:
                logger.error("Database connection error: %s", exc)
                raise InfrastructureError(
                    message="Database connection failed",
                    code="database_unavailable",
                ) from exc
            self._connected = True
            logger.info("Database connected")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Open a session, connecting first if needed

        Rolls back on error so the connection goes back to the pool clean.
        """
        await self.connect()
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        """Close all pooled connections"""
        await self.engine.dispose()
        self._connected = False


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session (for dependency injection)

    The handle is owned by the application lifespan and stored on `app.state.database`.

    Yields:
        AsyncSession: Async database session

    Example:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
