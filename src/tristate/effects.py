"""Adapters that run an action and capture its outcome as a TriState.

These are the only places where a raised failure is turned into an Error.
Process-level signals (KeyboardInterrupt, SystemExit) always propagate.
asyncio cancellation propagates too, unless the config asks for it to be
captured.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from src.tristate.config import TriStateConfig, default_config
from src.tristate.state import TriState, error, pure

T = TypeVar("T")

log = logging.getLogger(__name__)


def _capturable(config: TriStateConfig) -> tuple[type[BaseException], ...]:
    if config.capture_cancellation:
        return (Exception, asyncio.CancelledError)
    return (Exception,)


def _to_error(exc: BaseException, config: TriStateConfig) -> TriState[Any]:
    message = str(exc) or config.fallback_message
    if config.log_captured_failures:
        # The Error keeps only the message, so the traceback is logged here
        log.debug("Captured %s as Error: %s", type(exc).__name__, message, exc_info=exc)
    return error(message)


def effect(
    action: Callable[[], T], *, config: Optional[TriStateConfig] = None
) -> TriState[T]:
    """Run ``action`` now and wrap its result.

    Args:
        action: Zero-argument callable producing the value.
        config: Capture settings, defaults to ``default_config()``.

    Returns:
        Content with the returned value, or Error with the failure's message.
    """
    cfg = config or default_config()
    try:
        value = action()
    except _capturable(cfg) as exc:
        return _to_error(exc, cfg)
    return pure(value)


async def suspend_effect(
    action: Union[Callable[[], Awaitable[T]], Awaitable[T]],
    *,
    config: Optional[TriStateConfig] = None,
) -> TriState[T]:
    """Await ``action`` in the current task and wrap its settled outcome.

    ``action`` may be a coroutine function (or any callable returning an
    awaitable) or an awaitable such as a coroutine, Task or Future. No task is
    created here; the awaitable runs under the caller's event loop.
    """
    cfg = config or default_config()
    try:
        awaitable = action() if callable(action) else action
        value = await awaitable
    except _capturable(cfg) as exc:
        return _to_error(exc, cfg)
    return pure(value)
