"""Per-request deadline shared by the timeout middleware and the unit of work.

Cancelling a request only stops the awaiting coroutine: a sync route keeps
running in the threadpool. The deadline travels with the request context
into that thread so the unit of work can refuse to commit late.
"""

import time
from contextvars import ContextVar, Token

_deadline: ContextVar[float | None] = ContextVar("request_deadline", default=None)


def set_deadline(budget: float) -> Token[float | None]:
    """Start the clock for the current request. Returns the token for ``reset_deadline``."""
    return _deadline.set(time.monotonic() + budget)


def reset_deadline(token: Token[float | None]) -> None:
    _deadline.reset(token)


def deadline_passed() -> bool:
    """Whether the current request has outlived its budget. False outside a request."""
    deadline = _deadline.get()
    return deadline is not None and time.monotonic() > deadline
