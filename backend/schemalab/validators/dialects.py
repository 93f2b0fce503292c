"""Dialects: the per-format parts of validation, injected into one engine.

JSON and TOML share every constraint rule; they differ only in which `type`
names exist, how value kinds are named in messages, and how a missing
required table is reported.
"""

from typing import Optional

from schemalab.validators.base import AnyTypeHandler, BaseTypeHandler, KindTypeHandler
from schemalab.validators.temporal_validator import TEMPORAL_HANDLERS
from schemalab.validators.values import NUMERIC_KINDS, Value, ValueKind


def _is_whole(value: Value) -> bool:
    number = value.data
    return isinstance(number, int) or (isinstance(number, float) and number.is_integer())


class Dialect:
    """A named set of type handlers plus reporting conventions."""

    def __init__(
        self,
        name: str,
        handlers: list[BaseTypeHandler],
        kind_names: Optional[dict[ValueKind, str]] = None,
        report_missing_tables: bool = False,
    ):
        self.name = name
        self.handlers = {handler.name: handler for handler in handlers}
        self.kind_names = kind_names or {}
        self.report_missing_tables = report_missing_tables

    def handler_for(self, type_name: str) -> Optional[BaseTypeHandler]:
        return self.handlers.get(type_name)

    def kind_name(self, value: Value) -> str:
        """Name of a value's kind as used in `found` descriptors."""
        return self.kind_names.get(value.kind, value.kind.value)


def _common_handlers(number_kinds: set[ValueKind], integer: KindTypeHandler, float_: KindTypeHandler) -> list[BaseTypeHandler]:
    return [
        KindTypeHandler("object", {ValueKind.OBJECT}),
        KindTypeHandler("table", {ValueKind.OBJECT}),
        KindTypeHandler("array", {ValueKind.ARRAY}),
        KindTypeHandler("string", {ValueKind.STRING}),
        KindTypeHandler("number", number_kinds),
        integer,
        float_,
        KindTypeHandler("boolean", {ValueKind.BOOLEAN}),
        KindTypeHandler("null", {ValueKind.NULL}),
        AnyTypeHandler(),
    ]


# JSON numbers carry no integer/float distinction: `integer` means whole-valued.
JSON_DIALECT = Dialect(
    name="json",
    handlers=_common_handlers(
        {ValueKind.NUMBER},
        integer=KindTypeHandler("integer", {ValueKind.NUMBER}, predicate=_is_whole),
        float_=KindTypeHandler("float", {ValueKind.NUMBER}),
    ),
)

TOML_DIALECT = Dialect(
    name="toml",
    handlers=_common_handlers(
        set(NUMERIC_KINDS),
        integer=KindTypeHandler("integer", {ValueKind.INTEGER}),
        float_=KindTypeHandler("float", {ValueKind.FLOAT}),
    ) + TEMPORAL_HANDLERS,
    kind_names={ValueKind.OBJECT: "table"},
    report_missing_tables=True,
)
