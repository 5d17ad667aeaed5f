"""Structured exceptions for API errors."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from octokit_core.errors.models import ErrorDetail
    from octokit_core.request.response import OctokitResponse


class OctokitError(Exception):
    """Base exception for everything raised by octokit_core."""

    pass


class RequestError(OctokitError):
    """A request failed, either with an error status or on the network.

    Attributes:
        status_code: HTTP status (500 for network failures).
        response: The parsed response, if one was received.
        request: The request options, with credentials redacted.
        detail: Parsed GitHub error body, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "OctokitResponse | None" = None,
        request: dict[str, Any] | None = None,
        detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.request = request
        self.detail = detail


class NotModifiedError(RequestError):
    """304 Not Modified."""

    pass


class ClientError(RequestError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity (validation errors)."""

    def __init__(self, message: str, errors: list[Any] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors if errors is not None else []


class RateLimitError(ClientError):
    """429 Too Many Requests, or a 403 with an exhausted rate limit."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(RequestError):
    """5xx server errors."""

    pass


class GraphqlResponseError(OctokitError):
    """A GraphQL response carried an ``errors`` list.

    Attributes:
        errors: The ``errors`` entries returned by the server.
        data: Partial ``data`` returned alongside the errors, if any.
        request: The GraphQL request options.
        headers: Response headers.
    """

    def __init__(
        self,
        request: dict[str, Any],
        headers: dict[str, str],
        response_data: dict[str, Any],
    ):
        self.errors: list[dict[str, Any]] = response_data.get("errors") or []
        self.data = response_data.get("data")
        self.request = request
        self.headers = headers
        messages = "\n".join(f" - {error.get('message', error)}" for error in self.errors)
        super().__init__(f"Request failed due to following response errors:\n{messages}")
