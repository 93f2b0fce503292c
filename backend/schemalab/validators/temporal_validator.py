"""Temporal type handlers: `dateTime`, `date` and `time` for TOML documents."""

import re

from schemalab.validators.base import BaseTypeHandler
from schemalab.validators.models import ErrorCollector
from schemalab.validators.values import TEXT_KINDS, Value

# YYYY-MM-DD[T ]HH:MM:SS[.fraction][Z|±HH:MM]
DATETIME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})?$")

# YYYY-MM-DD
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# HH:MM:SS[.fraction]
TIME_PATTERN = re.compile(r"^\d{2}:\d{2}:\d{2}(\.\d+)?$")


class TemporalTypeHandler(BaseTypeHandler):
    """Accepts string-backed values and checks their text against a format."""

    def __init__(self, name: str, pattern: re.Pattern, description: str):
        self._name = name
        self.pattern = pattern
        self.description = description

    @property
    def name(self) -> str:
        return self._name

    def accepts(self, value: Value) -> bool:
        return value.kind in TEXT_KINDS

    def check_format(self, value: Value, path: str, errors: ErrorCollector) -> bool:
        if self.pattern.fullmatch(value.text):
            return True
        errors.invalid_datetime_format(path, expected=self.description, found=value.text)
        return False


TEMPORAL_HANDLERS = [
    TemporalTypeHandler("dateTime", DATETIME_PATTERN, "RFC 3339 datetime"),
    TemporalTypeHandler("date", DATE_PATTERN, "date (YYYY-MM-DD)"),
    TemporalTypeHandler("time", TIME_PATTERN, "time (HH:MM:SS)"),
]
