"""Value model: the normalized tree both document formats are converted into.

Every node is a `Value` with an explicit `ValueKind`. The kind is decided once,
when the adapter converts the parser output, so the validator never has to
probe Python types (e.g. `bool` being a subclass of `int`).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ValueKind(str, Enum):
    """Kinds a document node can have."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"      # JSON: no integer/float distinction
    INTEGER = "integer"    # TOML
    FLOAT = "float"        # TOML
    BOOLEAN = "boolean"
    NULL = "null"
    DATETIME = "dateTime"  # TOML, RFC 3339 text
    DATE = "date"          # TOML, YYYY-MM-DD
    TIME = "time"          # TOML, HH:MM:SS[.fraction]


NUMERIC_KINDS = frozenset({ValueKind.NUMBER, ValueKind.INTEGER, ValueKind.FLOAT})
TEMPORAL_KINDS = frozenset({ValueKind.DATETIME, ValueKind.DATE, ValueKind.TIME})
TEXT_KINDS = frozenset({ValueKind.STRING}) | TEMPORAL_KINDS


class Value(BaseModel):
    """A single node of a parsed document.

    `data` holds:
        OBJECT  -> dict[str, Value] (document key order)
        ARRAY   -> list[Value]
        STRING / DATETIME / DATE / TIME -> str
        NUMBER / INTEGER / FLOAT -> int or float
        BOOLEAN -> bool
        NULL    -> None
    """

    model_config = ConfigDict(frozen=True)

    kind: ValueKind
    data: Any = None

    # ── Constructors ──

    @classmethod
    def object(cls, members: dict[str, "Value"]) -> "Value":
        return cls(kind=ValueKind.OBJECT, data=dict(members))

    @classmethod
    def array(cls, items: list["Value"]) -> "Value":
        return cls(kind=ValueKind.ARRAY, data=list(items))

    @classmethod
    def string(cls, text: str) -> "Value":
        return cls(kind=ValueKind.STRING, data=text)

    @classmethod
    def number(cls, number) -> "Value":
        return cls(kind=ValueKind.NUMBER, data=number)

    @classmethod
    def integer(cls, number: int) -> "Value":
        return cls(kind=ValueKind.INTEGER, data=number)

    @classmethod
    def floating(cls, number: float) -> "Value":
        return cls(kind=ValueKind.FLOAT, data=number)

    @classmethod
    def boolean(cls, flag: bool) -> "Value":
        return cls(kind=ValueKind.BOOLEAN, data=flag)

    @classmethod
    def null(cls) -> "Value":
        return cls(kind=ValueKind.NULL)

    @classmethod
    def temporal(cls, kind: ValueKind, text: str) -> "Value":
        if kind not in TEMPORAL_KINDS:
            raise ValueError(f"'{kind.value}' is not a temporal kind")
        return cls(kind=kind, data=text)

    # ── Accessors ──

    @property
    def is_numeric(self) -> bool:
        return self.kind in NUMERIC_KINDS

    @property
    def is_text(self) -> bool:
        return self.kind in TEXT_KINDS

    @property
    def members(self) -> dict[str, "Value"]:
        return self.data if self.kind is ValueKind.OBJECT else {}

    @property
    def items(self) -> list["Value"]:
        return self.data if self.kind is ValueKind.ARRAY else []

    @property
    def text(self) -> str:
        """String content of string-backed kinds."""
        if not self.is_text:
            raise TypeError(f"{self.kind.value} value has no text")
        return self.data

    def to_native(self) -> Any:
        """Convert back to plain Python containers/scalars for display or JSON output."""
        if self.kind is ValueKind.OBJECT:
            return {key: member.to_native() for key, member in self.data.items()}
        if self.kind is ValueKind.ARRAY:
            return [item.to_native() for item in self.data]
        return self.data

    def display(self, limit: int = 60) -> str:
        """Short human-readable rendering, used for `found` descriptors."""
        if self.kind is ValueKind.OBJECT:
            return f"object with {len(self.data)} keys"
        if self.kind is ValueKind.ARRAY:
            return f"array with {len(self.data)} items"
        if self.kind is ValueKind.NULL:
            return "null"
        if self.kind is ValueKind.BOOLEAN:
            return "true" if self.data else "false"
        if self.kind is ValueKind.STRING:
            text = self.data if len(self.data) <= limit else self.data[: limit - 3] + "..."
            return f'"{text}"'
        return str(self.data)

    def equals_literal(self, literal: Any) -> bool:
        """Typed equality against a literal taken from a JSON schema (e.g. an `enum` entry).

        Booleans only equal booleans, numbers compare numerically across
        integer/float, string-backed kinds compare by text, containers deep-compare.
        """
        if self.kind is ValueKind.NULL:
            return literal is None
        if self.kind is ValueKind.BOOLEAN:
            return isinstance(literal, bool) and literal == self.data
        if self.is_numeric:
            return isinstance(literal, (int, float)) and not isinstance(literal, bool) and literal == self.data
        if self.is_text:
            return isinstance(literal, str) and literal == self.data
        if self.kind is ValueKind.ARRAY:
            return (
                isinstance(literal, list)
                and len(literal) == len(self.data)
                and all(item.equals_literal(lit) for item, lit in zip(self.data, literal))
            )
        if self.kind is ValueKind.OBJECT:
            return (
                isinstance(literal, dict)
                and literal.keys() == self.data.keys()
                and all(self.data[key].equals_literal(literal[key]) for key in literal)
            )
        return False
