# src/ranker/api/routers/health.py
from datetime import datetime
from typing import Literal

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from ...core.logging import log
from ...core.models.professors import ApiModel
from ...db.client import DbClient


class HealthResponse(ApiModel):
    """Health check response model."""
    status: Literal["healthy", "degraded"]
    timestamp: datetime
    version: str
    uptime: float
    database_connected: bool


class HealthRouter:
    """Health check routes for API monitoring."""

    def __init__(self, router: APIRouter, db_client: DbClient, version: str, start_time: datetime):
        self.router = router
        self.db_client = db_client
        self.version = version
        self.start_time = start_time

    def register_all_routes(self) -> None:
        @self.router.get(
            "",
            response_model=HealthResponse,
            summary="Health check",
            description="Get the current health status of the API",
        )
        def health_check() -> HealthResponse:
            """Basic health check endpoint."""
            is_connected = False
            try:
                is_connected = self.db_client.test_connection()
            except SQLAlchemyError as e:
                log.warn(f"Database health check failed: {e}")

            uptime = (datetime.now() - self.start_time).total_seconds()

            return HealthResponse(
                status="healthy" if is_connected else "degraded",
                timestamp=datetime.now(),
                version=self.version,
                uptime=uptime,
                database_connected=is_connected,
            )

        @self.router.get(
            "/ping",
            response_class=PlainTextResponse,
            summary="Ping",
            description="Simple ping endpoint for load balancers",
        )
        def ping() -> str:
            """Simple ping endpoint for load balancers."""
            return "pong"
