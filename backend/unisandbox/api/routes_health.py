"""Liveness endpoint that also pings the database."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from unisandbox.core.db import get_db
from unisandbox.schemas.common import HealthStatus

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthStatus, responses={503: {"model": HealthStatus}})
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        LOGGER.warning("Health check could not reach the database: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=HealthStatus(status="degraded", database="down").model_dump(),
        )
    return HealthStatus(status="ok", database="up")
