"""Optional values as an explicit two-variant union.

``Option[T]`` is either ``Present(value)`` or ``Absent()``. Both variants are
frozen dataclasses exposing the same methods, so callers can branch with
``is_present()`` or with structural pattern matching::

    match lookup(key):
        case Present(value):
            ...
        case Absent():
            ...
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Literal, NoReturn

from resultant.errors import PreconditionViolationError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["Absent", "Option", "Present"]


@dataclasses.dataclass(frozen=True, slots=True)
class Present[T]:
    """An option holding a value."""

    value: T

    def is_present(self) -> Literal[True]:
        return True

    def is_absent(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default_value: T) -> T:  # noqa: ARG002
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Present[U]:
        """Apply ``f`` to the value and wrap the outcome in ``Present``."""
        return Present(f(self.value))

    def chain[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Return ``f(value)`` as is; ``f`` decides presence."""
        return f(self.value)


@dataclasses.dataclass(frozen=True, slots=True)
class Absent:
    """An option holding nothing. All instances compare equal."""

    def is_present(self) -> Literal[False]:
        return False

    def is_absent(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        raise PreconditionViolationError(
            "called `unwrap()` on an `Absent` value",
            variant="Absent",
            hint="Check is_present() first or use unwrap_or(default).",
        )

    def unwrap_or[T](self, default_value: T) -> T:
        return default_value

    def map(self, f: Callable[..., object]) -> Absent:  # noqa: ARG002
        return self

    def chain(self, f: Callable[..., object]) -> Absent:  # noqa: ARG002
        return self


type Option[T] = Present[T] | Absent
