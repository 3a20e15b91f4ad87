"""Demonstration driver.

Runs one synchronous and one asynchronous capture and logs what came back.

Examples:
- python -m resultant
- python -m resultant --delay 0 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from resultant.capture import capture, capture_async
from resultant.config import Config
from resultant.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from resultant.result import Result

logger = logging.getLogger("resultant.demo")


class DemoError(Exception):
    """Raised on purpose by the synchronous demo step."""


def _explode() -> int:
    raise DemoError("Boom!!!")


async def _slow_hundred(delay_s: float) -> int:
    await asyncio.sleep(delay_s)
    return 100


def _report(label: str, result: Result[object, Exception]) -> None:
    if result.is_success():
        logger.info("%s: %s", label, result.unwrap())
    else:
        logger.error("%s: Error: %s", label, result.unwrap_failure())


async def run_demo(config: Config) -> int:
    """Run both demo steps; return 0 when the asynchronous step succeeded."""
    sync_result = capture(_explode)
    _report("sync", sync_result)

    async_result = await capture_async(lambda: _slow_hundred(config.demo_delay_s))
    _report("async", async_result)

    return 0 if async_result.is_success() else 1


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m resultant",
        description="Show capture/capture_async turning exceptions into values.",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds the asynchronous step sleeps (env: RESULTANT_DEMO_DELAY_S).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level name (env: RESULTANT_LOG_LEVEL).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        base = Config.from_env()
        config = Config(
            log_level=args.log_level or base.log_level,
            demo_delay_s=base.demo_delay_s if args.delay is None else args.delay,
        )
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"Hint: {exc.hint}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Using %s", config)
    return asyncio.run(run_demo(config))


if __name__ == "__main__":
    raise SystemExit(main())
