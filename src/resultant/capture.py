"""Adapters from raised exceptions to ``Result`` values.

``capture`` and ``capture_async`` are the boundary where exception-based
failure becomes value-based failure. Inside the boundary, errors travel as
``Failure`` payloads; they are stored verbatim, never wrapped or stringified.

Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
``SystemExit`` and ``asyncio.CancelledError`` keep propagating so that
interrupts and task cancellation behave as usual.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from resultant.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

__all__ = ["capture", "capture_async"]

logger = logging.getLogger(__name__)


def _describe(f: Callable[..., Any]) -> str:
    return getattr(f, "__qualname__", None) or repr(f)


def capture[T](f: Callable[[], T]) -> Result[T, Exception]:
    """Call ``f()`` and return its outcome as a ``Result``.

    Args:
        f: Zero-argument callable, invoked once, synchronously.

    Returns:
        ``Success(value)`` when ``f`` returns, ``Failure(exc)`` holding the
        exact exception object when it raises.

    Example:
        port = capture(lambda: int(os.environ["PORT"])).to_option_success()
    """
    try:
        value = f()
    except Exception as exc:
        logger.debug("capture: %s raised %r", _describe(f), exc)
        return Failure(exc)
    return Success(value)


async def capture_async[T](
    f: Callable[[], Awaitable[T]],
) -> Result[T, Exception]:
    """Await ``f()`` and return its settlement as a ``Result``.

    The returned result is available only after the awaitable settles. There
    is no timeout: if the awaitable never settles, neither does this
    coroutine. Wrap ``f`` with ``asyncio.timeout`` when a bound is needed.

    Args:
        f: Zero-argument callable returning an awaitable (typically an
            ``async def`` function). An exception raised while producing the
            awaitable is captured like one raised while awaiting it.

    Returns:
        ``Success(value)`` on normal settlement, ``Failure(exc)`` holding the
        exact exception object otherwise.
    """
    try:
        value = await f()
    except Exception as exc:
        logger.debug("capture_async: %s raised %r", _describe(f), exc)
        return Failure(exc)
    return Success(value)
