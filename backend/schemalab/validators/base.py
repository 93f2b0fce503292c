"""Base type handler: abstract class implementing the Strategy Pattern.

Each recognized schema `type` name maps to one handler. Dialects are built
from handler sets, so format-specific types are added without touching the
validator.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from schemalab.validators.models import ErrorCollector
from schemalab.validators.values import Value, ValueKind


class BaseTypeHandler(ABC):
    """Abstract base for schema type handlers.

    Contract:
        - accepts() decides whether a value has the declared type
        - check_format() runs only on accepted values and reports at most one error
        - both are pure: same input → same output
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Schema `type` name this handler answers to."""
        ...

    @abstractmethod
    def accepts(self, value: Value) -> bool:
        ...

    def check_format(self, value: Value, path: str, errors: ErrorCollector) -> bool:
        """Report format violations of an accepted value. Returns False if one was found."""
        return True


class KindTypeHandler(BaseTypeHandler):
    """Accepts values whose kind is in a fixed set, optionally narrowed by a predicate."""

    def __init__(
        self,
        name: str,
        kinds: set[ValueKind],
        predicate: Optional[Callable[[Value], bool]] = None,
    ):
        self._name = name
        self.kinds = frozenset(kinds)
        self.predicate = predicate

    @property
    def name(self) -> str:
        return self._name

    def accepts(self, value: Value) -> bool:
        if value.kind not in self.kinds:
            return False
        return self.predicate is None or self.predicate(value)


class AnyTypeHandler(BaseTypeHandler):
    """`type: any`: every value is accepted."""

    @property
    def name(self) -> str:
        return "any"

    def accepts(self, value: Value) -> bool:
        return True
