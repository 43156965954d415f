"""API response models."""

from typing import Any, Literal, Optional

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """One field or object error, with its resolved message."""

    object_name: str
    field: Optional[str] = None      # None for object errors
    code: Optional[str] = None       # Bare code, e.g. "required"
    codes: list[str] = []            # Full fallback chain, most specific first
    arguments: list[Any] = []
    rejected_value: Any = None
    binding_failure: bool = False
    message: str


class ValidationFailedResponse(BaseModel):
    """Returned instead of the item when validation fails."""

    error: Literal["validation_failed"] = "validation_failed"
    object_name: str
    errors: list[ErrorDetail]
    form: dict[str, Any]             # Values to redisplay, rejected input included


class ItemResponse(BaseModel):
    """A validated item, echoed back."""

    id: Optional[int] = None
    item_name: Optional[str] = None
    price: Optional[int] = None
    quantity: Optional[int] = None
    status: Literal["validated"] = "validated"


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
