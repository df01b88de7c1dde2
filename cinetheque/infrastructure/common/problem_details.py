"""RFC 7807 problem details and the exception handlers that emit them.

Every non-2xx response of the API is an ``application/problem+json`` body:

- CinethequeError -> its own status, title and type
- DomainError -> 400 with the broken invariant in ``errors``
- RequestValidationError -> 400 with one ``"<field>: <message>"`` per error
- HTTPException (unknown route, wrong method, rate limit) -> its status
- Exception (catch-all) -> 500, never leaks internal details
"""

import logging
from collections.abc import Sequence
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from cinetheque.config import get_settings
from cinetheque.domain.common.exceptions import DomainError
from cinetheque.exceptions import CinethequeError, InvalidError, UnauthorizedError

logger = logging.getLogger(__name__)

PROBLEM_JSON = "application/problem+json"
REQUEST_ID_HEADER = "X-Request-ID"
GENERIC_ERROR_DETAIL = "An unexpected error occurred. Please try again later."
_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "


class ProblemDetail(BaseModel):
    """Schema for an RFC 7807 problem detail body."""

    type: str = Field(..., description="URI identifying the problem type")
    title: str = Field(..., description="Short summary of the problem type")
    status: int = Field(..., description="HTTP status code")
    detail: str | None = Field(None, description="Explanation of this occurrence")
    instance: str | None = Field(None, description="Request path of this occurrence")
    errors: list[str] | None = Field(None, description="Field errors, as 'field: message'")
    error: str | None = Field(None, description="OAuth error code for authentication failures")


def problem_response(
    request: Request,
    status_code: int,
    *,
    type_slug: str,
    title: str,
    detail: str | None = None,
    errors: Sequence[str] | None = None,
    error: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a problem+json response."""
    problem = ProblemDetail(
        type=f"{get_settings().PROBLEM_TYPE_BASE_URL}/{type_slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=list(errors) if errors is not None else None,
        error=error,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_JSON,
        headers=headers,
    )


def internal_error_response(request: Request) -> JSONResponse:
    """The generic 500 problem, tagged with the request's correlation id."""
    request_id = getattr(request.state, "request_id", None)
    return problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        type_slug="internal",
        title="Internal server error",
        detail=GENERIC_ERROR_DETAIL,
        headers={REQUEST_ID_HEADER: request_id} if request_id else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all global exception handlers on the FastAPI app."""
    _register_cinetheque_error_handler(app)
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handlers(app)
    _register_generic_error_handler(app)


def _register_cinetheque_error_handler(app: FastAPI) -> None:
    @app.exception_handler(CinethequeError)
    async def cinetheque_error_handler(request: Request, exc: CinethequeError) -> JSONResponse:
        """Handle typed service failures."""
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(f"Internal failure on {request.url.path}: {exc.message}")
            return internal_error_response(request)

        logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        errors = exc.errors if isinstance(exc, InvalidError) else None
        error_code = exc.error_code if isinstance(exc, UnauthorizedError) else None
        headers = (
            {"WWW-Authenticate": f'Bearer error="{error_code}"'} if error_code else None
        )
        return problem_response(
            request,
            exc.status_code,
            type_slug=exc.type_slug,
            title=exc.title,
            detail=exc.message,
            errors=errors,
            error=error_code,
            headers=headers,
        )


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        """Handle broken domain invariants as validation failures."""
        logger.info(f"Domain error on {request.url.path}: {exc}")
        field = exc.details.get("field")
        return problem_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            type_slug="validation",
            title="Validation error",
            detail=exc.message,
            errors=[f"{field}: {exc.message}"] if field else [exc.message],
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors, one entry per failing field."""
        logger.info(f"Validation error on {request.url.path}: {exc.errors()}")
        return problem_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            type_slug="validation",
            title="Validation error",
            detail="One or more fields are invalid",
            errors=[_format_validation_error(e) for e in exc.errors()],
        )


def _register_http_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        """Handle slowapi rejections."""
        logger.warning(f"Rate limit exceeded on {request.url.path}: {exc.detail}")
        return problem_response(
            request,
            status.HTTP_429_TOO_MANY_REQUESTS,
            type_slug="too-many-requests",
            title="Too many requests",
            detail=f"Rate limit exceeded: {exc.detail}",
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle routing errors and explicit HTTPExceptions."""
        phrase = HTTPStatus(exc.status_code).phrase
        return problem_response(
            request,
            exc.status_code,
            type_slug=phrase.lower().replace(" ", "-"),
            title=phrase,
            detail=str(exc.detail),
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all, never leaks internal details."""
        request_id = getattr(request.state, "request_id", None)
        logger.error(
            f"Unhandled exception on {request.url.path} (request_id={request_id}): {exc}",
            exc_info=True,
        )
        return internal_error_response(request)


def _format_validation_error(error: dict[str, Any]) -> str:
    """Render a pydantic error as ``"<field>: <message>"``.

    Body fields are reported by their camelCase wire name, even when pydantic
    located the error by the Python attribute name.
    """
    raw_loc = error.get("loc", ())
    loc = [part for part in raw_loc if isinstance(part, str)]
    field = loc[-1] if loc else "request"
    if raw_loc and raw_loc[0] == "body" and "_" in field:
        field = to_camel(field)
    message = str(error.get("msg", "is invalid"))
    message = message.removeprefix(_PYDANTIC_VALUE_ERROR_PREFIX)
    return f"{field}: {message}"
