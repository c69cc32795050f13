"""
tests.helpers

Test doubles shared across test modules.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

from extension_name.greeting import GreetingProvider

T = TypeVar("T")


class RecordingExecutor:
    """Privileged executor that counts invocations and runs the callable as-is."""

    def __init__(self) -> None:
        self.calls = 0
        self.thread_ids: list[int] = []

    def call_privileged(self, fn: Callable[[], T]) -> T:
        self.calls += 1
        self.thread_ids.append(threading.get_ident())
        return fn()


class GreetingUnavailable(RuntimeError):
    pass


class FailingGreetings(GreetingProvider):
    def __init__(self) -> None:
        super().__init__("")

    def hello(self) -> str:
        raise GreetingUnavailable("no greeting today")


class LogRecorder:
    """Stands in for a module logger; keeps each event with the bound context."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def _record(self, event: str, **kw: Any) -> None:
        self.events.append((event, {**structlog.contextvars.get_contextvars(), **kw}))

    debug = info = warning = exception = _record

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
