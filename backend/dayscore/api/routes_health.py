"""Health check endpoints; never behind auth."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dayscore.core.db import get_db
from dayscore.schemas.common import HealthStatus

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthStatus)
def health(request: Request, db: Session = Depends(get_db)) -> HealthStatus:
    settings = request.app.state.settings
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as exc:
        LOGGER.error("Health check database ping failed: %s", exc)
        database = "unavailable"
    return HealthStatus(
        status="ok" if database == "ok" else "degraded",
        database=database,
        auth_mode=settings.DAYSCORE_AUTH_MODE,
    )
