"""Error envelopes shared by every endpoint.

Error codes:
- ARTICLE_NOT_FOUND (404)
- STORE_UNAVAILABLE (503): Redis unreachable or timed out
- STORE_OPERATION_FAILED (500): Redis rejected a command
- INTERNAL_ERROR (500)
"""

from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    code: str
    message: str
    detail: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Body of app-level error responses (store failures, internal errors).

    Format: { "error": { "code": str, "message": str, "detail": object } }
    """

    error: ErrorDetail


class HTTPErrorResponse(BaseModel):
    """Body of errors raised as HTTPException (404s).

    Format: { "detail": { "error": { "code": str, "message": str, "detail": object } } }
    """

    detail: ErrorResponse
