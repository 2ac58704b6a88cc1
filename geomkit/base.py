from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, NamedTuple

from typing_extensions import override

EQ_TOL_REL = 1e-15
EQ_TOL_ABS = 1e-8

# the generic Vector constructor warns below this dimension unless a dimension is stated
MIN_SILENT_DIM = 4


class ValidationResult(NamedTuple):
    """The inspectable outcome of a validity check.

    Attributes:
        is_valid: True if the checked input is valid.
        reason: Human-readable explanation why the input is invalid, empty if it is valid.

    """

    is_valid: bool
    reason: str = ""

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def valid(cls) -> ValidationResult:
        return cls(True)

    @classmethod
    def invalid(cls, reason: str) -> ValidationResult:
        return cls(False, reason)


class Describable(ABC):
    """Mixin that renders an object as ``Name(key: value, key: value)`` for diagnostics.

    Classes using the mixin only have to provide the mapping of properties to display. The name defaults to the name
    of the class and can be overridden by setting ``object_name``.

    """

    object_name: str | None = None

    @property
    @abstractmethod
    def properties(self) -> dict[str, Any]:
        """The properties shown in the textual representation, in display order."""

    @override
    def __str__(self) -> str:
        props = ", ".join(f"{key}: {value}" for key, value in self.properties.items())
        return f"{self.object_name or self.__class__.__name__}({props})"
