"""Health check router: verifica anche la raggiungibilità del database."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mundialito.core.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """
    Health check per load balancer e monitoring.
    200 con database "ok" se SELECT 1 riesce, altrimenti 503 con database "unavailable".
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Health check: database non raggiungibile: %s", e)
        return JSONResponse(status_code=503, content={"status": "degraded", "database": "unavailable"})
    return {"status": "healthy", "database": "ok"}
