"""Result Monad for explicit success/failure values.

A ``Result[T, E]`` is either ``Success(value)`` or ``Failure(error)``. The
variants are frozen, slotted dataclasses sharing one method surface, so a
chain of fallible steps reads as straight-line code and short-circuits on the
first failure::

    parsed = capture(lambda: int(raw)).map(abs).chain(validate)

Transformation callables are never invoked on the inactive variant. The only
operations that raise are the accessors ``unwrap`` and ``unwrap_failure``
when called on the wrong variant; they raise
:class:`~resultant.errors.PreconditionViolationError`.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Literal, NoReturn

from resultant.errors import PreconditionViolationError
from resultant.option import Absent, Option, Present

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["Failure", "Result", "Success"]


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """A successful result, containing the value."""

    value: T

    def is_success(self) -> Literal[True]:
        return True

    def is_failure(self) -> Literal[False]:
        return False

    def to_option_success(self) -> Option[T]:
        return Present(self.value)

    def to_option_failure(self) -> Absent:
        return Absent()

    def unwrap(self) -> T:
        return self.value

    def unwrap_failure(self) -> NoReturn:
        raise PreconditionViolationError(
            "called `unwrap_failure()` on a `Success` value",
            variant="Success",
            hint="Check is_failure() before calling unwrap_failure().",
        )

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply ``f`` to the value and wrap the outcome in ``Success``."""
        return Success(f(self.value))

    def map_failure(self, f: Callable[..., object]) -> Success[T]:  # noqa: ARG002
        return self

    def chain[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Return ``f(value)`` as is, so ``f`` may itself fail."""
        return f(self.value)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E]:
    """A failed result, containing the error."""

    error: E

    def is_success(self) -> Literal[False]:
        return False

    def is_failure(self) -> Literal[True]:
        return True

    def to_option_success(self) -> Absent:
        return Absent()

    def to_option_failure(self) -> Option[E]:
        return Present(self.error)

    def unwrap(self) -> NoReturn:
        try:
            detail = str(self.error)
        except Exception:
            detail = object.__repr__(self.error)
        exc = PreconditionViolationError(
            f"called `unwrap()` on a `Failure` value: {detail}",
            variant="Failure",
            hint="Check is_success() before calling unwrap().",
        )
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def unwrap_failure(self) -> E:
        return self.error

    def map(self, f: Callable[..., object]) -> Failure[E]:  # noqa: ARG002
        return self

    def map_failure[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply ``f`` to the error and wrap the outcome in ``Failure``."""
        return Failure(f(self.error))

    def chain(self, f: Callable[..., object]) -> Failure[E]:  # noqa: ARG002
        return self


type Result[T, E] = Success[T] | Failure[E]
