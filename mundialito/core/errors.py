"""
Catalogo chiuso degli error code e tipi di esito (Success / Failure).

I servizi non sollevano eccezioni per gli errori previsti: restituiscono un
Failure con un ErrorCode del catalogo. Il router traduce il codice in status HTTP.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INCONSISTENT = "inconsistent"
    INVALID_INPUT = "invalid_input"
    INTERNAL = "internal"


class ErrorCode(str, Enum):
    """Unico posto dove sono definiti i codici di errore esposti ai client."""

    # --- 400 ---
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PLAYER_NOT_IN_MATCH = "PLAYER_NOT_IN_MATCH"
    MATCH_RESULT_INCONSISTENT = "MATCH_RESULT_INCONSISTENT"

    # --- 404 ---
    TEAM_NOT_FOUND = "TEAM_NOT_FOUND"
    PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
    MATCH_NOT_FOUND = "MATCH_NOT_FOUND"

    # --- 409 ---
    MATCH_ALREADY_PLAYED = "MATCH_ALREADY_PLAYED"
    TEAM_NAME_CONFLICT = "TEAM_NAME_CONFLICT"
    TEAM_HAS_DEPENDENCIES = "TEAM_HAS_DEPENDENCIES"
    RESOURCE_CONFLICT = "RESOURCE_CONFLICT"

    # --- 500 (solo exception handler globale) ---
    INTERNAL_ERROR = "INTERNAL_ERROR"

    @property
    def kind(self) -> ErrorKind:
        return _KINDS[self]


_KINDS: dict[ErrorCode, ErrorKind] = {
    ErrorCode.VALIDATION_ERROR: ErrorKind.INVALID_INPUT,
    ErrorCode.PLAYER_NOT_IN_MATCH: ErrorKind.INVALID_INPUT,
    ErrorCode.MATCH_RESULT_INCONSISTENT: ErrorKind.INCONSISTENT,
    ErrorCode.TEAM_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.PLAYER_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.MATCH_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.MATCH_ALREADY_PLAYED: ErrorKind.CONFLICT,
    ErrorCode.TEAM_NAME_CONFLICT: ErrorKind.CONFLICT,
    ErrorCode.TEAM_HAS_DEPENDENCIES: ErrorKind.CONFLICT,
    ErrorCode.RESOURCE_CONFLICT: ErrorKind.CONFLICT,
    ErrorCode.INTERNAL_ERROR: ErrorKind.INTERNAL,
}


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    events: list[Any] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    code: ErrorCode
    message: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.code.kind


Outcome = Union[Success[T], Failure]
