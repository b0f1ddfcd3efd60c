# src/ranker/db/client.py
"""Engine, session factory and FastAPI session dependency."""

import os
from contextlib import contextmanager
from typing import Generator, Optional

from pydantic import BaseModel, Field
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..core.logging import color_palette, log
from .models import Base


class PoolConfig(BaseModel):
    """Connection pool settings (ignored for SQLite)."""

    pool_size: int = 5
    max_overflow: int = 10
    pool_pre_ping: bool = True


class DbConfig(BaseModel):
    """Where the professor store lives and how to reach it."""

    driver_type: str = "sqlite"
    database: str = "ranker.db"
    user: Optional[str] = None
    password: Optional[str] = None
    host: str = "localhost"
    port: Optional[int] = None
    echo: bool = False
    pool_config: PoolConfig = Field(default_factory=PoolConfig)
    url_override: Optional[str] = None

    @property
    def url(self) -> str:
        if self.url_override:
            return self.url_override
        if self.driver_type == "sqlite":
            return f"sqlite:///{self.database}"
        credentials = self.user or ""
        if self.password:
            credentials = f"{credentials}:{self.password}"
        if credentials:
            credentials = f"{credentials}@"
        port = f":{self.port}" if self.port else ""
        return f"{self.driver_type}://{credentials}{self.host}{port}/{self.database}"

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @classmethod
    def from_env(cls) -> "DbConfig":
        """
        Build a config from ``RANKER_DB_*`` environment variables.

        ``RANKER_DB_URL`` wins over the individual parts when set.
        """
        port = os.getenv("RANKER_DB_PORT")
        return cls(
            driver_type=os.getenv("RANKER_DB_DRIVER", "sqlite"),
            database=os.getenv("RANKER_DB_NAME", "ranker.db"),
            user=os.getenv("RANKER_DB_USER"),
            password=os.getenv("RANKER_DB_PASSWORD"),
            host=os.getenv("RANKER_DB_HOST", "localhost"),
            port=int(port) if port else None,
            echo=os.getenv("RANKER_DB_ECHO", "").lower() in ("1", "true", "yes"),
            url_override=os.getenv("RANKER_DB_URL"),
        )


class DbClient:
    """Owns the engine and hands out request-scoped sessions."""

    def __init__(self, config: DbConfig):
        self.config = config
        self.engine: Engine = self._create_engine()
        self.SessionLocal = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False
        )

    def _create_engine(self) -> Engine:
        if self.config.is_sqlite:
            kwargs = {"connect_args": {"check_same_thread": False}}
            if self.config.url in ("sqlite://", "sqlite:///:memory:"):
                # One shared connection, otherwise every session sees an empty database
                kwargs["poolclass"] = StaticPool
            engine = create_engine(self.config.url, echo=self.config.echo, **kwargs)

            @event.listens_for(engine, "connect")
            def _unicode_lower(dbapi_conn, _record):
                # SQLite's lower() only folds ASCII; icontains relies on it
                dbapi_conn.create_function(
                    "lower", 1, lambda s: s.lower() if s is not None else None, deterministic=True
                )

            return engine

        pool = self.config.pool_config
        return create_engine(
            self.config.url,
            echo=self.config.echo,
            pool_size=pool.pool_size,
            max_overflow=pool.max_overflow,
            pool_pre_ping=pool.pool_pre_ping,
        )

    def create_tables(self) -> None:
        """Create every mapped table that does not exist yet."""
        Base.metadata.create_all(self.engine)
        log.success(
            f"Ensured {color_palette['count'](len(Base.metadata.tables))} tables"
        )

    def get_db(self) -> Generator[Session, None, None]:
        """FastAPI dependency yielding one session per request."""
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for SQLAlchemy sessions.

        Rolls back on error and always closes the session. Nothing is
        committed here: this package only reads.
        """
        session = self.SessionLocal()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def test_connection(self) -> bool:
        """Run a trivial query; raises whatever the driver raises."""
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
