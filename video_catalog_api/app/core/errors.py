"""
Error types and exception handlers.

Services raise ``RecordNotFoundError`` when a lookup misses; the
endpoints turn it into a 404 response through ``not_found_response``.
Request validation failures never reach a handler: FastAPI raises
``RequestValidationError`` and ``validation_exception_handler``
reports it as a 400 with the same ``{error, message}`` shape plus the
pydantic error list under ``details``.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class RecordNotFoundError(LookupError):
    """Raised when no record with the requested id exists."""

    def __init__(self, entity: str, record_id: Any) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} with id {record_id} was not found")


def not_found_response(exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Not Found", "message": str(exc)},
    )


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg', 'invalid value')}"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 Bad Request."""
    # ``ctx`` may hold the raised exception object, which is not JSON data.
    errors = [{k: v for k, v in e.items() if k != "ctx"} for e in exc.errors()]
    logging.getLogger(__name__).info(
        "Rejected %s %s: %d validation error(s)", request.method, request.url.path, len(errors)
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Bad Request",
            "message": "; ".join(_describe(e) for e in errors) or "Invalid request",
            "details": jsonable_encoder(errors),
        },
    )
