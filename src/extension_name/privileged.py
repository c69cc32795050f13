"""
extension_name.privileged

Privileged-execution bridge.

Responsibilities:
- Run a zero-argument callable under an elevated (system) identity.
- Return the callable's result verbatim and propagate its failures unchanged.
- Expose the identity bound by the innermost privileged scope.
"""

from __future__ import annotations

from collections.abc import Callable
from contextvars import ContextVar
from typing import Protocol, TypeVar

from extension_name.auth.models import Principal
from extension_name.observability.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__)

_current_principal: ContextVar[Principal | None] = ContextVar(
    "extension_name_privileged_principal", default=None
)


class PrivilegedExecutor(Protocol):
    def call_privileged(self, fn: Callable[[], T]) -> T: ...


def current_principal() -> Principal | None:
    return _current_principal.get()


class SystemPrivilegedExecutor:
    """
    Executes callables as a fixed system principal.

    The elevated identity is scoped with a ContextVar token, so it is restored
    on exit (including on failure) and never leaks across concurrent requests.
    """

    def __init__(self, *, subject: str = "system", roles: frozenset[str] = frozenset({"admin"})) -> None:
        self._principal = Principal(subject=subject, roles=roles)

    def call_privileged(self, fn: Callable[[], T]) -> T:
        token = _current_principal.set(self._principal)
        try:
            result = fn()
        except Exception:
            log.warning("privileged_call_failed", subject=self._principal.subject)
            raise
        finally:
            _current_principal.reset(token)
        log.debug("privileged_call", subject=self._principal.subject)
        return result


# --- Module Notes -----------------------------------------------------------
# The host's real impersonation semantics are opaque; this executor only swaps the
# identity visible through `current_principal()`. Swap in another PrivilegedExecutor
# via `create_app(privileged=...)` when running inside a host that provides one.
