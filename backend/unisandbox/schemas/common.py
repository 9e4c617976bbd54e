"""Response bodies shared across routers."""
from __future__ import annotations

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str
    database: str


class ErrorDetail(BaseModel):
    detail: str
