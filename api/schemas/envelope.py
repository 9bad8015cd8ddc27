"""
Uniform response envelope.

Every exercise endpoint answers with the same shape:

    {"success": bool, "message"?: str, "count"?: int, "data"?: ..., "errors"?: [str]}

Unset keys are omitted from the body.
"""

from typing import Any, List, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Response envelope shared by all exercise endpoints."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: Optional[str] = Field(None, description="Human readable outcome")
    count: Optional[int] = Field(None, description="Number of items in data (list endpoints)")
    data: Optional[Any] = Field(None, description="Operation payload")
    errors: Optional[List[str]] = Field(None, description="Per-field validation messages")


def api_response(status_code: int = 200, **fields: Any) -> JSONResponse:
    """Build a JSONResponse carrying an ApiResponse body."""
    body = ApiResponse(**fields)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def error_response(
    status_code: int,
    message: str,
    errors: Optional[List[str]] = None,
) -> JSONResponse:
    """Build a failure envelope."""
    return api_response(status_code, success=False, message=message, errors=errors)
