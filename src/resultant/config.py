"""Configuration for the ``python -m resultant`` demonstration."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
import os

from dotenv import load_dotenv

from resultant.errors import ConfigurationError

_LOG_LEVEL_ENV = "RESULTANT_LOG_LEVEL"
_DEMO_DELAY_ENV = "RESULTANT_DEMO_DELAY_S"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class Config:
    """Immutable settings for the demonstration driver.

    The library itself takes no configuration; these only shape how the
    demo logs and how long its asynchronous step waits.

    Example:
        config = Config.from_env()
        # RESULTANT_LOG_LEVEL=DEBUG shows the adapters' capture logs
    """

    log_level: str = "INFO"
    demo_delay_s: float = 1.0

    def __post_init__(self) -> None:
        """Normalise and validate fields."""
        level = str(self.log_level).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level!r}",
                hint=f"Use one of: {', '.join(_LOG_LEVELS)}",
            )
        object.__setattr__(self, "log_level", level)

        delay = self.demo_delay_s
        if (
            isinstance(delay, bool)
            or not isinstance(delay, int | float)
            or not math.isfinite(delay)
            or delay < 0
        ):
            raise ConfigurationError(
                f"demo_delay_s must be a finite number ≥ 0, got {delay!r}",
                hint="This is how long the asynchronous demo step sleeps.",
            )

    @property
    def log_level_value(self) -> int:
        """Numeric level for ``logging``."""
        return logging.getLevelNamesMapping()[self.log_level]

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from ``RESULTANT_*`` variables, loading ``.env`` first."""
        load_dotenv()
        kwargs: dict[str, str | float] = {}

        level = os.environ.get(_LOG_LEVEL_ENV)
        if level:
            kwargs["log_level"] = level

        raw_delay = os.environ.get(_DEMO_DELAY_ENV)
        if raw_delay:
            try:
                kwargs["demo_delay_s"] = float(raw_delay)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{_DEMO_DELAY_ENV} is not a number: {raw_delay!r}",
                    hint="Use seconds as a decimal, e.g. 0.5",
                ) from exc

        return cls(**kwargs)  # type: ignore[arg-type]

    def __str__(self) -> str:
        """Return a developer-friendly representation."""
        return f"Config(log_level={self.log_level!r}, demo_delay_s={self.demo_delay_s})"

    __repr__ = __str__
