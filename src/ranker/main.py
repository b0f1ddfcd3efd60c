"""ASGI entry point, e.g. ``uvicorn ranker.main:app``.

Database settings come from the ``RANKER_DB_*`` environment variables.
"""

from fastapi import FastAPI

from ranker.app import RankerApp
from ranker.core.config import RankerConfig
from ranker.db.client import DbClient, DbConfig

config = RankerConfig()
db_client = DbClient(DbConfig.from_env())

ranker = RankerApp(config, db_client)
ranker.generate_all_routes()

app: FastAPI = ranker.app

