"""HTTP middleware: request correlation ids and per-route timeouts."""

import asyncio
import logging
import time
import uuid

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from cinetheque.config import get_settings
from cinetheque.infrastructure.common.deadline import reset_deadline, set_deadline
from cinetheque.infrastructure.common.problem_details import (
    REQUEST_ID_HEADER,
    internal_error_response,
)

logger = logging.getLogger(__name__)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Assign a correlation id to every request.

    The id is taken from the ``X-Request-ID`` header when the client sends
    one, stored on ``request.state``, bound into the structlog context and
    returned in the response headers.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({process_time * 1000:.1f} ms, request_id={request_id})"
        )
        return response


class TimeoutMiddleware:
    """Cancel requests that exceed their time budget and answer 500.

    The budget is the ``ROUTE_TIMEOUTS`` entry with the longest prefix of the
    request path, or ``REQUEST_TIMEOUT_SECONDS``. A request whose response
    has already started streaming is not interrupted. The deadline is also
    published for the unit of work, which rolls back a commit that comes
    after it.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        budget = get_settings().timeout_for(request.url.path)
        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        token = set_deadline(budget)
        try:
            await asyncio.wait_for(self.app(scope, receive, send_wrapper), timeout=budget)
        except TimeoutError:
            if response_started:
                raise
            logger.error(
                f"Request {request.method} {request.url.path} exceeded its {budget}s budget "
                f"(request_id={getattr(request.state, 'request_id', None)})"
            )
            response = internal_error_response(request)
            await response(scope, receive, send)
        finally:
            reset_deadline(token)
