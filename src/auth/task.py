from __future__ import annotations

from typing import Awaitable, Callable

from auth.classifier import describe_failure
from auth.errors import AuthenticationFailed, RequestFailed
from logger import get_logger

Operation = Callable[[], Awaitable[object]]
ErrorSink = Callable[[str], object]

_log = get_logger("auth.task")


async def run(operation: Operation, on_error: ErrorSink) -> bool:
    """
    Await one authentication operation, single attempt.

    Returns True when it completes. Identity and request failures are turned
    into display text, handed to ``on_error`` and reported as False. Any
    other exception propagates to the caller untouched.
    """
    name = getattr(operation, "__qualname__", repr(operation))
    _log.debug(f"auth.task.start {name}")

    try:
        await operation()
    except (AuthenticationFailed, RequestFailed) as e:
        _log.warning(f"auth.task.failed {name} code={e.code}")
        on_error(describe_failure(e))
        return False

    _log.info(f"auth.task.ok {name}")
    return True
