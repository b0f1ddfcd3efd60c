"""FastAPI application assembly for the professor query service."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from rich.markup import escape
from starlette.exceptions import HTTPException

from .api.routers.health import HealthRouter
from .api.routers.professors import ProfessorRouter
from .core.config import RankerConfig
from .core.exceptions import RankerError
from .core.logging import color_palette, log
from .db.client import DbClient, DbConfig
from .db.models import Base
from .ui import display_table_structure, print_welcome


def _error_body(message: str, status_code: int, detail: Any = None) -> Dict[str, Any]:
    body = {"error": True, "message": message, "status_code": status_code}
    if detail is not None:
        body["detail"] = detail
    return body


class RankerApp:
    """Main application class: configures FastAPI and registers the routes."""

    def __init__(self, config: RankerConfig, db_client: DbClient, app: Optional[FastAPI] = None):
        """Initialize the application around an existing or new FastAPI app."""
        self.config = config
        self.db_client = db_client
        self.app = app or FastAPI(
            docs_url=f"{config.api_prefix}/docs",
            openapi_url=f"{config.api_prefix}/openapi.json",
            redoc_url=None,
            lifespan=self._lifespan,
        )
        self.routers: Dict[str, APIRouter] = {}
        self.start_time = datetime.now()
        log.set_level(config.log_level)
        self._initialize_app()

    def _initialize_app(self) -> None:
        """Initialize FastAPI app configuration."""
        self.app.title = self.config.project_name
        self.app.version = self.config.version
        self.app.description = self.config.description

        if self.config.author:
            self.app.contact = {"name": self.config.author, "email": self.config.email}

        if self.config.license_info:
            self.app.license_info = self.config.license_info

        # Read-only API: only GET is ever served
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI) -> AsyncIterator[None]:
        self.print_welcome()
        yield

    @property
    def docs_url(self) -> str:
        return f"{self.config.api_prefix}/docs"

    def print_welcome(self) -> None:
        """Print welcome message with app information."""
        self.db_client.test_connection()
        print_welcome(self.config.project_name, self.config.version, self.docs_url)
        tables = Base.metadata.sorted_tables
        log.table(
            headers=["Table", "Columns"],
            rows=[[color_palette["table"](t.name), len(t.columns)] for t in tables],
        )
        if self.routers:
            log.table(
                headers=["Router", "Prefix"],
                rows=[[name, color_palette["route"](router.prefix)] for name, router in self.routers.items()],
            )
        if self.config.debug_mode:
            for table in tables:
                display_table_structure(table)

    def gen_professor_routes(self) -> None:
        """Register the professor search and detail routes."""
        log.section("Generating Professor Routes")
        router = APIRouter(prefix=self.config.api_prefix, tags=["Professors"])
        with log.indented():
            ProfessorRouter(db_dependency=self.db_client.get_db, router=router).generate_routes()
        self.routers["professors"] = router
        self.app.include_router(router)

    def gen_health_routes(self) -> None:
        """
        Generate health check routes for API monitoring.

        Creates endpoints to check API health and status:
        - Health check (including database connectivity)
        - Ping endpoint
        """
        log.section("Generating Health Routes")
        router = APIRouter(prefix=f"{self.config.api_prefix}/health", tags=["Health"])
        HealthRouter(
            router=router,
            db_client=self.db_client,
            version=self.config.version,
            start_time=self.start_time,
        ).register_all_routes()
        self.routers["health"] = router
        self.app.include_router(router)
        log.success(f"Generated health routes on {color_palette['route'](router.prefix)}")

    def configure_error_handlers(self) -> None:
        """
        Configure global error handlers for the API.

        Domain errors keep their own status code; anything unexpected is
        logged and answered with a 500.
        """

        @self.app.exception_handler(RankerError)
        async def ranker_error_handler(request: Request, exc: RankerError):
            return JSONResponse(
                status_code=exc.status_code,
                content=_error_body(exc.message, exc.status_code),
            )

        @self.app.exception_handler(HTTPException)
        async def http_exception_handler(request: Request, exc: HTTPException):
            return JSONResponse(
                status_code=exc.status_code,
                content=_error_body(str(exc.detail), exc.status_code),
            )

        @self.app.exception_handler(RequestValidationError)
        async def validation_error_handler(request: Request, exc: RequestValidationError):
            return JSONResponse(
                status_code=422,
                content=_error_body(
                    "Invalid request parameters", 422, detail=jsonable_encoder(exc.errors())
                ),
            )

        @self.app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            log.error(f"Unhandled exception on {request.url.path}: {escape(repr(exc))}")
            return JSONResponse(
                status_code=500,
                content=_error_body(
                    "Internal server error",
                    500,
                    detail=str(exc) if self.config.debug_mode else None,
                ),
            )

        log.success("Configured global error handlers")

    def generate_all_routes(self) -> None:
        """Generate all routes for the API in the recommended order."""
        self.gen_health_routes()
        self.gen_professor_routes()
        self.configure_error_handlers()


def create_app(config: Optional[RankerConfig] = None, db_client: Optional[DbClient] = None) -> FastAPI:
    """Build a ready-to-serve FastAPI app (database settings default to the environment)."""
    config = config or RankerConfig()
    db_client = db_client or DbClient(DbConfig.from_env())
    ranker = RankerApp(config, db_client)
    ranker.generate_all_routes()
    return ranker.app
