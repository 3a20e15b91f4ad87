"""resultant: explicit success/failure and optional values.

Public API:
    - Success / Failure / Result: a value or an error, never both
    - Present / Absent / Option: a value or nothing
    - capture(): run a callable, turning a raised exception into a Failure
    - capture_async(): the same for an awaitable
"""

from __future__ import annotations

import logging

from resultant.capture import capture, capture_async
from resultant.errors import (
    ConfigurationError,
    PreconditionViolationError,
    ResultantError,
)
from resultant.option import Absent, Option, Present
from resultant.result import Failure, Result, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultant")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultant").addHandler(logging.NullHandler())

__all__ = [
    "Absent",
    "ConfigurationError",
    "Failure",
    "Option",
    "PreconditionViolationError",
    "Present",
    "Result",
    "ResultantError",
    "Success",
    "capture",
    "capture_async",
]
