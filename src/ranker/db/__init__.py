"""Database interaction components for the ranker query layer."""

from ranker.db.client import DbClient, DbConfig, PoolConfig

__all__ = ["DbClient", "DbConfig", "PoolConfig"]
