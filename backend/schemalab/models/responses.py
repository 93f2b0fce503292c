"""API response models."""

from pydantic import BaseModel
from typing import Any, Optional, Literal

from schemalab.validators.models import ValidationError, ValidationResult


class ValidateResponse(BaseModel):
    """Outcome of a validation request."""

    valid: bool
    format: Literal["json", "toml"]
    value: Optional[Any] = None
    errors: list[ValidationError] = []
    summary: dict[str, int] = {}
    report: str

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidateResponse":
        return cls(
            valid=result.ok,
            format=result.format,
            value=result.value.to_native() if result.value is not None else None,
            errors=result.errors,
            summary=result.summary,
            report=result.describe(),
        )


class SampleResponse(BaseModel):
    """A bundled sample document."""

    name: str
    schema_name: str
    format: Literal["json", "toml"]
    content: Optional[str] = None


class HealthDependency(BaseModel):
    """Health status of a single dependency."""

    status: Literal["healthy", "degraded"]
    latency_ms: Optional[float] = None
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "degraded"]
    version: str
    uptime_seconds: float
    dependencies: dict[str, HealthDependency]
