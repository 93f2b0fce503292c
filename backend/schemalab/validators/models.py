"""Validation models: error kinds, errors, the per-run collector, and the result.

All validation is deterministic: same input → same output, no hidden state.
"""

from enum import Enum
from typing import Iterator, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemalab.validators.values import Value

SourceFormat = Literal["json", "toml"]


class ErrorKind(str, Enum):
    """Kinds of validation findings."""

    INVALID_TYPE = "invalid-type"
    MISSING_REQUIRED_PROPERTY = "missing-required-property"
    INVALID_FORMAT = "invalid-format"                  # pattern mismatches
    INVALID_VALUE = "invalid-value"                    # bounds, lengths, enum membership
    TABLE_NOT_FOUND = "table-not-found"
    INVALID_ARRAY_ITEM_TYPE = "invalid-array-item-type"
    INVALID_DATETIME_FORMAT = "invalid-datetime-format"
    PARSE_ERROR = "parse-error"                        # fatal, at most one per run
    OTHER = "other"                                    # disallowed keys, malformed schema


class ValidationError(BaseModel):
    """A single validation finding."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    kind: ErrorKind
    path: str
    message: str
    expected: Optional[str] = None  # What the schema asked for
    found: Optional[str] = None     # What the document contained

    def display(self) -> str:
        return f"{self.path}: {self.message}"


class ErrorCollector:
    """Ordered, append-only sink for the errors of one validation run.

    Never share a collector between runs.
    """

    def __init__(self):
        self._errors: list[ValidationError] = []

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    @property
    def errors(self) -> list[ValidationError]:
        return list(self._errors)

    def add(
        self,
        kind: ErrorKind,
        path: str,
        message: str,
        expected: Optional[str] = None,
        found: Optional[str] = None,
    ) -> ValidationError:
        error = ValidationError(kind=kind, path=path, message=message, expected=expected, found=found)
        self._errors.append(error)
        return error

    # ── Helper Methods ──

    def invalid_type(self, path: str, expected: str, found: str, array_item: bool = False) -> ValidationError:
        if array_item:
            return self.add(
                ErrorKind.INVALID_ARRAY_ITEM_TYPE,
                path,
                f"Invalid array item type at '{path}'",
                expected=expected,
                found=found,
            )
        return self.add(ErrorKind.INVALID_TYPE, path, f"Invalid type at '{path}'", expected=expected, found=found)

    def missing_required_property(self, path: str, name: str) -> ValidationError:
        return self.add(ErrorKind.MISSING_REQUIRED_PROPERTY, path, f"Missing required property '{name}'")

    def table_not_found(self, path: str, name: str) -> ValidationError:
        return self.add(ErrorKind.TABLE_NOT_FOUND, path, f"Table '{name}' not found", expected="table")

    def invalid_format(self, path: str, pattern: str, found: str) -> ValidationError:
        return self.add(
            ErrorKind.INVALID_FORMAT,
            path,
            "String does not match pattern",
            expected=f"pattern: {pattern}",
            found=found,
        )

    def invalid_value(self, path: str, message: str, expected: str, found: str) -> ValidationError:
        return self.add(ErrorKind.INVALID_VALUE, path, message, expected=expected, found=found)

    def invalid_datetime_format(self, path: str, expected: str, found: str) -> ValidationError:
        return self.add(
            ErrorKind.INVALID_DATETIME_FORMAT,
            path,
            f"Invalid {expected} format at '{path}'",
            expected=expected,
            found=found,
        )

    def other(self, path: str, message: str) -> ValidationError:
        return self.add(ErrorKind.OTHER, path, message)


class ValidationResult(BaseModel):
    """Outcome of one validation call: the validated value, or the full error list."""

    format: SourceFormat
    value: Optional[Value] = None
    errors: list[ValidationError] = Field(default_factory=list)

    @classmethod
    def success(cls, format: SourceFormat, value: Value) -> "ValidationResult":
        return cls(format=format, value=value)

    @classmethod
    def failure(cls, format: SourceFormat, errors: list[ValidationError]) -> "ValidationResult":
        return cls(format=format, errors=errors)

    @classmethod
    def parse_failure(cls, format: SourceFormat, message: str) -> "ValidationResult":
        return cls.failure(format, [ValidationError(kind=ErrorKind.PARSE_ERROR, path="$", message=message)])

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def summary(self) -> dict[str, int]:
        """Count of errors by kind, in first-seen order."""
        counts: dict[str, int] = {}
        for err in self.errors:
            counts[err.kind] = counts.get(err.kind, 0) + 1
        return counts

    def describe(self) -> str:
        """Multi-line human-readable report."""
        label = self.format.upper()
        if self.ok:
            return f"Validation successful. {label} is valid according to the schema."

        lines = [f"{label} schema validation failed with {len(self.errors)} error(s):"]
        for index, err in enumerate(self.errors, start=1):
            line = f"[{index}] {err.display()}"
            if err.expected is not None and err.found is not None:
                line += f" (expected: {err.expected}, found: {err.found})"
            lines.append(line)
        return "\n".join(lines)
