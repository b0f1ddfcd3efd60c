"""Application level configuration."""

from typing import Dict, Literal, Optional

from pydantic import BaseModel


class RankerConfig(BaseModel):
    """Settings used to build the FastAPI application."""

    project_name: str = "Teacher Ranker API"
    version: str = "1.0.0"
    description: str = "Search professors and read their reviews"
    author: Optional[str] = None
    email: Optional[str] = None
    license_info: Optional[Dict[str, str]] = None
    debug_mode: bool = False
    api_prefix: str = "/api"
    log_level: Literal["debug", "info", "warn", "error"] = "info"
