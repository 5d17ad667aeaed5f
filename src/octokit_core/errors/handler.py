"""Error handling utilities for HTTP responses."""

import re
from typing import TYPE_CHECKING, Any

from octokit_core.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    NotModifiedError,
    RateLimitError,
    RequestError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from octokit_core.errors.models import ErrorDetail

if TYPE_CHECKING:
    from octokit_core.request.response import OctokitResponse


def redact_authorization(request: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of request options with the credential part of the
    ``authorization`` header replaced by ``[REDACTED]``.

    The scheme is kept, so ``"token abc"`` becomes ``"token [REDACTED]"``.
    """
    headers = request.get("headers")
    if not headers or "authorization" not in headers:
        return dict(request)

    redacted = dict(headers)
    redacted["authorization"] = re.sub(r"(?<= ).*$", "[REDACTED]", headers["authorization"])
    return {**request, "headers": redacted}


def raise_for_status(response: "OctokitResponse", request: dict[str, Any] | None = None) -> None:
    """Raise appropriate exception for HTTP error responses.

    Parses the GitHub error body if present, otherwise uses the standard
    HTTP status code to exception mapping. 304 is treated as an error because
    conditional requests must be handled explicitly by the caller.

    Args:
        response: Parsed response
        request: Request options attached to the exception (redacted)

    Raises:
        RequestError subclass based on status code
    """
    status_code = response.status
    if status_code < 400 and status_code != 304:
        return

    request = redact_authorization(request) if request is not None else None

    if status_code == 304:
        raise NotModifiedError("Not modified", status_code=304, response=response, request=request)

    detail = ErrorDetail.from_data(response.data)

    exception_map = {
        400: BadRequestError,
        401: UnauthorizedError,
        403: ForbiddenError,
        404: NotFoundError,
        409: ConflictError,
        422: ValidationError,
        429: RateLimitError,
    }

    # Determine exception class
    if status_code == 403 and response.headers.get("x-ratelimit-remaining") == "0":
        exc_class = RateLimitError
    elif status_code in exception_map:
        exc_class = exception_map[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = RequestError

    # Build error message
    if detail:
        message = detail.to_exception_message()
    else:
        response_text = response.data[:200] if isinstance(response.data, str) else ""
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    kwargs = {
        "status_code": status_code,
        "response": response,
        "request": request,
        "detail": detail,
    }

    if exc_class == RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise exc_class(message=message, retry_after=retry_after, **kwargs)

    if exc_class == ValidationError:
        raise exc_class(message=message, errors=detail.errors if detail else None, **kwargs)

    raise exc_class(message=message, **kwargs)
