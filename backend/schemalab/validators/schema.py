"""Schema model: the recognized subset of JSON Schema keywords.

A `Schema` is immutable once built. `Schema.from_mapping` never fails on a bad
fragment: keyword values of the wrong shape are recorded in `malformed` and a
fragment that is not an object at all records `shape_error`, so the validator
can report them at the right path and keep going.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]

# keyword -> field name
_COUNT_KEYWORDS = {
    "minLength": "min_length",
    "maxLength": "max_length",
    "minItems": "min_items",
    "maxItems": "max_items",
}

_NUMBER_KEYWORDS = {
    "minimum": "minimum",
    "maximum": "maximum",
    "exclusiveMinimum": "exclusive_minimum",
    "exclusiveMaximum": "exclusive_maximum",
    "multipleOf": "multiple_of",
}


def _is_number(raw: Any) -> bool:
    return isinstance(raw, (int, float)) and not isinstance(raw, bool)


def _as_count(raw: Any) -> Optional[int]:
    """Non-negative integer (JSON may spell it `2.0`), else None."""
    if not _is_number(raw):
        return None
    if isinstance(raw, float):
        if not raw.is_integer():
            return None
        raw = int(raw)
    return raw if raw >= 0 else None


class Schema(BaseModel):
    """One node of a parsed schema."""

    model_config = ConfigDict(frozen=True)

    type: Optional[str] = None
    properties: dict[str, "Schema"] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    additional_properties: Optional[bool] = None
    items: Optional["Schema"] = None

    # Array
    min_items: Optional[int] = None
    max_items: Optional[int] = None

    # String
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None

    # Number
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    exclusive_minimum: Optional[Number] = None
    exclusive_maximum: Optional[Number] = None
    multiple_of: Optional[Number] = None

    # Any kind, raw JSON literals
    enum: Optional[list[Any]] = None

    # Keywords present but unusable, in schema order
    malformed: list[str] = Field(default_factory=list)
    shape_error: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Any) -> "Schema":
        """Build a schema node (and its children) from decoded JSON."""
        if not isinstance(raw, dict):
            kind = "array" if isinstance(raw, list) else type(raw).__name__
            return cls(shape_error=f"Schema fragment must be an object, found {kind}")

        fields: dict[str, Any] = {}
        malformed: list[str] = []

        for keyword, setting in raw.items():
            if keyword == "type":
                if isinstance(setting, str):
                    fields["type"] = setting
                else:
                    malformed.append(keyword)

            elif keyword == "properties":
                if isinstance(setting, dict):
                    fields["properties"] = {name: cls.from_mapping(child) for name, child in setting.items()}
                else:
                    malformed.append(keyword)

            elif keyword == "required":
                if isinstance(setting, list) and all(isinstance(name, str) for name in setting):
                    fields["required"] = setting
                else:
                    malformed.append(keyword)

            elif keyword == "additionalProperties":
                if isinstance(setting, bool):
                    fields["additional_properties"] = setting
                else:
                    malformed.append(keyword)

            elif keyword == "items":
                if isinstance(setting, dict):
                    fields["items"] = cls.from_mapping(setting)
                else:
                    malformed.append(keyword)

            elif keyword in _COUNT_KEYWORDS:
                count = _as_count(setting)
                if count is None:
                    malformed.append(keyword)
                else:
                    fields[_COUNT_KEYWORDS[keyword]] = count

            elif keyword in _NUMBER_KEYWORDS:
                if not _is_number(setting) or (keyword == "multipleOf" and setting <= 0):
                    malformed.append(keyword)
                else:
                    fields[_NUMBER_KEYWORDS[keyword]] = setting

            elif keyword == "pattern":
                if isinstance(setting, str):
                    fields["pattern"] = setting
                else:
                    malformed.append(keyword)

            elif keyword == "enum":
                if isinstance(setting, list):
                    fields["enum"] = setting
                else:
                    malformed.append(keyword)

        return cls(malformed=malformed, **fields)

    @property
    def declares_table(self) -> bool:
        return self.type in ("table", "object")
