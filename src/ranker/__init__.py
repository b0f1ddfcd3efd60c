"""
ranker: read-only search API over professors, their universities and reviews.
"""
from ranker.app import RankerApp, create_app
from ranker.core.config import RankerConfig
from ranker.db.client import DbClient, DbConfig, PoolConfig


__version__ = "1.0.0"

__all__ = ["RankerApp", "RankerConfig", "DbClient", "DbConfig", "PoolConfig", "create_app"]
