"""Mundialito — API del torneo: squadre, giocatori, partite, risultati e classifica."""

import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from mundialito.core.config import get_log_level
from mundialito.core.database import init_db
from mundialito.core.errors import ErrorCode
from mundialito.routers import health_router, matches_router, standings_router, teams_router
from mundialito.routers.responses import envelope_response

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Mundialito",
    description="Torneo all'italiana: calendario, risultati con marcatori, classifica.",
    version="0.1.0",
)

app.include_router(health_router)
app.include_router(teams_router)
app.include_router(matches_router)
app.include_router(standings_router)


@app.middleware("http")
async def trace_requests(request: Request, call_next):
    """traceId da header X-Trace-Id o nuovo; log di metodo, path, status e durata."""
    request.state.trace_id = request.headers.get("X-Trace-Id") or uuid.uuid4().hex
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    response.headers["X-Trace-Id"] = request.state.trace_id
    logger.info(
        "HTTP %s %s -> %s in %.1fms traceId=%s",
        request.method, request.url.path, response.status_code, elapsed_ms, request.state.trace_id,
    )
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Richiesta non valida %s %s: %s", request.method, request.url.path, exc.errors())
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = f"{field}: {first.get('msg', 'valore non valido')}" if field else "Richiesta non valida"
    return envelope_response(request, ErrorCode.VALIDATION_ERROR, message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Errore non gestito %s %s: %s", request.method, request.url.path, exc)
    return envelope_response(request, ErrorCode.INTERNAL_ERROR, "Si è verificato un errore imprevisto")


@app.on_event("startup")
def on_startup():
    """Configura il logging e crea le tabelle all'avvio."""
    logging.basicConfig(level=get_log_level(), format="%(levelname)s [%(name)s] %(message)s")
    init_db()
