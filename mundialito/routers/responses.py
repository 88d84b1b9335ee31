"""
Mappatura Failure -> risposta HTTP con envelope { errorCode, message, traceId }.
"""

import uuid

from fastapi import Request
from fastapi.responses import JSONResponse

from mundialito.core.errors import ErrorCode, ErrorKind, Failure
from mundialito.schemas.errors import ErrorEnvelope

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.INCONSISTENT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


def trace_id_for(request: Request) -> str:
    trace_id = getattr(request.state, "trace_id", None)
    if not trace_id:
        trace_id = uuid.uuid4().hex
        request.state.trace_id = trace_id
    return trace_id


def status_code_for(code: ErrorCode) -> int:
    return STATUS_BY_KIND.get(code.kind, 500)


def envelope_response(request: Request, code: ErrorCode, message: str, status_code: int | None = None) -> JSONResponse:
    envelope = ErrorEnvelope(error_code=code.value, message=message, trace_id=trace_id_for(request))
    return JSONResponse(
        status_code=status_code or status_code_for(code),
        content=envelope.model_dump(by_alias=True),
    )


def error_response(request: Request, failure: Failure) -> JSONResponse:
    return envelope_response(request, failure.code, failure.message)
