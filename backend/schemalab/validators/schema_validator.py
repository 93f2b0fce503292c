"""Schema Validator: walks a Value tree in lock-step with a Schema tree.

One engine serves both formats; everything format-specific lives in the
injected `Dialect`. Validation is fail-soft: every violation is collected and
traversal continues into siblings and descendants. Only a type mismatch stops
the checks for that one subtree.
"""

import json
import math
import re
from functools import lru_cache
from typing import Optional

from schemalab.config import get_settings
from schemalab.validators.dialects import Dialect
from schemalab.validators.models import ErrorCollector, ValidationError
from schemalab.validators.paths import ROOT, child_index, child_key
from schemalab.validators.schema import Schema
from schemalab.validators.values import Value, ValueKind

# |remainder| below this counts as an exact multiple
MULTIPLE_TOLERANCE = 1e-8


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern)


def _off_multiple(number, divisor) -> bool:
    if isinstance(number, int) and isinstance(divisor, int):
        return number % divisor != 0
    try:
        remainder = math.remainder(number, divisor)
    except (ValueError, OverflowError):
        return True
    return not abs(remainder) < MULTIPLE_TOLERANCE


class SchemaValidator:
    """Recursive-descent validator parameterized by a dialect."""

    def __init__(self, dialect: Dialect, max_depth: Optional[int] = None):
        self.dialect = dialect
        self.max_depth = max_depth if max_depth is not None else get_settings().MAX_VALIDATION_DEPTH

    @property
    def name(self) -> str:
        return f"{self.dialect.name}-schema-validator"

    def validate(self, value: Value, schema: Schema, path: str = ROOT) -> list[ValidationError]:
        """Validate a value against a schema.

        Args:
            value: Root of the (sub)tree to validate
            schema: Schema node describing it
            path: Path of `value` within its document

        Returns:
            Every violation found, in document traversal order (empty = valid)
        """
        errors = ErrorCollector()
        self._validate_node(value, schema, path, errors, depth=0)
        return errors.errors

    def _validate_node(
        self,
        value: Value,
        schema: Schema,
        path: str,
        errors: ErrorCollector,
        depth: int,
        array_item: bool = False,
    ) -> None:
        # Null is absent content, never a violation
        if value.kind is ValueKind.NULL:
            return

        if schema.shape_error:
            errors.other(path, schema.shape_error)
            return

        if depth > self.max_depth:
            errors.other(path, f"Maximum nesting depth of {self.max_depth} exceeded")
            return

        for keyword in schema.malformed:
            errors.other(path, f"Malformed schema keyword '{keyword}'")

        # ── 1. Type ──
        if schema.type is not None:
            handler = self.dialect.handler_for(schema.type)
            if handler is None:
                errors.other(path, f"Unrecognized schema type '{schema.type}'")
                return
            if not handler.accepts(value):
                errors.invalid_type(
                    path,
                    expected=schema.type,
                    found=self.dialect.kind_name(value),
                    array_item=array_item,
                )
                return
            if not handler.check_format(value, path, errors):
                return

        # ── 2. Structure, by the value's own kind ──
        if value.kind is ValueKind.OBJECT:
            self._check_object(value, schema, path, errors, depth)
        elif value.kind is ValueKind.ARRAY:
            self._check_array(value, schema, path, errors, depth)
        elif value.is_text:
            self._check_string(value, schema, path, errors)
        elif value.is_numeric:
            self._check_number(value, schema, path, errors)
        # Booleans: type check only

        # ── 3. Enum ──
        if schema.enum is not None:
            self._check_enum(value, schema, path, errors)

    def _check_object(self, value: Value, schema: Schema, path: str, errors: ErrorCollector, depth: int) -> None:
        members = value.members

        for name in schema.required:
            if name in members:
                continue
            declared = schema.properties.get(name)
            if self.dialect.report_missing_tables and declared is not None and declared.declares_table:
                errors.table_not_found(child_key(path, name), name)
            else:
                errors.missing_required_property(child_key(path, name), name)

        # Document key order keeps the error list deterministic
        for key, member in members.items():
            member_path = child_key(path, key)
            member_schema = schema.properties.get(key)
            if member_schema is not None:
                self._validate_node(member, member_schema, member_path, errors, depth + 1)
            elif schema.additional_properties is False:
                errors.other(member_path, f"Additional property '{key}' not allowed")

    def _check_array(self, value: Value, schema: Schema, path: str, errors: ErrorCollector, depth: int) -> None:
        items = value.items
        count = len(items)

        if schema.min_items is not None and count < schema.min_items:
            errors.invalid_value(
                path,
                f"Array has fewer items than required minimum of {schema.min_items}",
                expected=f"array with min {schema.min_items} items",
                found=f"array with {count} items",
            )

        if schema.max_items is not None and count > schema.max_items:
            errors.invalid_value(
                path,
                f"Array has more items than allowed maximum of {schema.max_items}",
                expected=f"array with max {schema.max_items} items",
                found=f"array with {count} items",
            )

        # Same schema for every element, no tuple typing
        if schema.items is not None:
            for index, item in enumerate(items):
                self._validate_node(item, schema.items, child_index(path, index), errors, depth + 1, array_item=True)

    def _check_string(self, value: Value, schema: Schema, path: str, errors: ErrorCollector) -> None:
        text = value.text
        length = len(text)

        if schema.min_length is not None and length < schema.min_length:
            errors.invalid_value(
                path,
                f"String is shorter than required minimum length {schema.min_length}",
                expected=f"length >= {schema.min_length}",
                found=f"length {length}",
            )

        if schema.max_length is not None and length > schema.max_length:
            errors.invalid_value(
                path,
                f"String is longer than allowed maximum length {schema.max_length}",
                expected=f"length <= {schema.max_length}",
                found=f"length {length}",
            )

        if schema.pattern is not None:
            try:
                regex = _compile(schema.pattern)
            except re.error as e:
                errors.other(path, f"Invalid regex pattern in schema: {e}")
            else:
                # Unanchored: any match passes unless the pattern anchors itself
                if regex.search(text) is None:
                    errors.invalid_format(path, schema.pattern, value.display())

    def _check_number(self, value: Value, schema: Schema, path: str, errors: ErrorCollector) -> None:
        number = value.data
        found = value.display()

        if schema.minimum is not None and number < schema.minimum:
            errors.invalid_value(
                path,
                f"Number is less than required minimum {schema.minimum}",
                expected=f">= {schema.minimum}",
                found=found,
            )

        if schema.maximum is not None and number > schema.maximum:
            errors.invalid_value(
                path,
                f"Number is greater than allowed maximum {schema.maximum}",
                expected=f"<= {schema.maximum}",
                found=found,
            )

        if schema.exclusive_minimum is not None and number <= schema.exclusive_minimum:
            errors.invalid_value(
                path,
                f"Number must be greater than {schema.exclusive_minimum}",
                expected=f"> {schema.exclusive_minimum}",
                found=found,
            )

        if schema.exclusive_maximum is not None and number >= schema.exclusive_maximum:
            errors.invalid_value(
                path,
                f"Number must be less than {schema.exclusive_maximum}",
                expected=f"< {schema.exclusive_maximum}",
                found=found,
            )

        if schema.multiple_of is not None and _off_multiple(number, schema.multiple_of):
            errors.invalid_value(
                path,
                f"Number must be a multiple of {schema.multiple_of}",
                expected=f"multiple of {schema.multiple_of}",
                found=found,
            )

    def _check_enum(self, value: Value, schema: Schema, path: str, errors: ErrorCollector) -> None:
        if any(value.equals_literal(literal) for literal in schema.enum):
            return
        allowed = ", ".join(json.dumps(literal) for literal in schema.enum)
        errors.invalid_value(
            path,
            f"Value must be one of: {allowed}",
            expected=f"one of [{allowed}]",
            found=value.display(),
        )
