"""
Shared error handling for TasbihKit.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class TasbihKitError(Exception):
    """Base exception for TasbihKit."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class InvalidArgumentError(TasbihKitError):
    """A required argument was missing or empty."""

    def __init__(self, message: str = "Invalid argument", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_ARGUMENT", message, details)


class FetchFailedError(TasbihKitError):
    """The dataset for a category could not be retrieved."""

    def __init__(
        self,
        category: str,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        code: str = "FETCH_FAILED"
    ):
        self.category = category
        self.status_code = status_code
        if message is None:
            if status_code is not None:
                message = f"Category file '{category}.json' not found (Status: {status_code})."
            else:
                message = f"Category file '{category}.json' could not be fetched."
        merged = {"category": category, "status_code": status_code}
        merged.update(details or {})
        super().__init__(code, message, merged)


class ParseFailedError(FetchFailedError):
    """The dataset body was not a JSON array of item objects."""

    def __init__(
        self,
        category: str,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if message is None:
            message = f"Category file '{category}.json' is not a valid Tasbih dataset."
        super().__init__(category, message, status_code, details, code="PARSE_FAILED")


class NotFoundError(TasbihKitError):
    """No item with the requested id exists in the category."""

    def __init__(self, category: str, item_id: str):
        self.category = category
        self.item_id = item_id
        super().__init__(
            "NOT_FOUND",
            f"Tasbih with ID '{item_id}' not found in category '{category}'.",
            {"category": category, "item_id": item_id}
        )
