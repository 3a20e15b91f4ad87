"""Exception hierarchy for resultant."""

from __future__ import annotations


class ResultantError(Exception):
    """Base exception for all resultant errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class PreconditionViolationError(ResultantError):
    """An accessor was called on the variant it is undefined for.

    This signals a programming error (e.g. ``unwrap()`` on a ``Failure``),
    never a represented failure. Check ``is_success()``/``is_present()``
    first, or use ``unwrap_or``.
    """

    def __init__(
        self, message: str, *, variant: str, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.variant = variant


class ConfigurationError(ResultantError):
    """Configuration validation or resolution failed."""
