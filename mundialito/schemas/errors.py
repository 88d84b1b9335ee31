"""Envelope di errore unico: { errorCode, message, traceId }."""

from pydantic import BaseModel, Field


class ErrorEnvelope(BaseModel):
    error_code: str = Field(serialization_alias="errorCode")
    message: str
    trace_id: str = Field(serialization_alias="traceId")
