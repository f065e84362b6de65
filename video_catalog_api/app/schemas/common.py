"""
Schemas shared by several domains.

``ApiModel`` converts snake_case attribute names to the camelCase keys
used on the wire (``fileSize``, ``userId`` …) while still accepting
the Python names when models are built inside the services.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Body returned when a record is not found (404)."""

    error: str = Field(..., example="Not Found")
    message: str = Field(..., example="Video with id 6f1c… was not found")


class ValidationErrorResponse(ErrorResponse):
    """Body returned when the request fails validation (400)."""

    error: str = Field(..., example="Bad Request")
    message: str = Field(..., example="body.title: String should have at least 1 character")
    details: List[Dict[str, Any]] = Field(default_factory=list, description="pydantic error entries")


NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse}}
BAD_REQUEST_RESPONSE = {400: {"model": ValidationErrorResponse}}
