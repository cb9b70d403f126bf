"""
Error envelope returned by the admin API when an operation fails as a whole.

Clients only ever see the error kind and a generic message; the underlying
exception is logged server-side.
"""

import enum

from fastapi.responses import JSONResponse


class ErrorKind(str, enum.Enum):
    PERSISTENCE_ERROR = "persistence_error"
    STORAGE_ERROR = "storage_error"


def error_response(kind: ErrorKind, message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": kind.value,
            "message": message,
        },
    )
