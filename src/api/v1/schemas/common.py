"""Error body shared by every endpoint and by settled mutation results."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """``{error_code, message, details}``; ``details`` carries field errors for 422s."""

    error_code: str
    message: str
    details: Any | None = None
