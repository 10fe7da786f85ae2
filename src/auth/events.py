from __future__ import annotations

import inspect
from typing import Any, Callable, List

Handler = Callable[..., Any]


class Signal:
    """
    Minimal event hook with explicit subscribe/unsubscribe.

    Handlers run in subscription order. A handler returning an awaitable is
    awaited before the next one runs.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._handlers: List[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    async def emit(self, *args: Any) -> None:
        # Snapshot so handlers may unsubscribe while being called
        for handler in list(self._handlers):
            result = handler(*args)
            if inspect.isawaitable(result):
                await result
