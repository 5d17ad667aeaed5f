"""Error handling for REST and GraphQL requests."""

from octokit_core.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    GraphqlResponseError,
    NotFoundError,
    NotModifiedError,
    OctokitError,
    RateLimitError,
    RequestError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from octokit_core.errors.handler import raise_for_status, redact_authorization
from octokit_core.errors.models import ErrorDetail

__all__ = [
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ErrorDetail",
    "ForbiddenError",
    "GraphqlResponseError",
    "NotFoundError",
    "NotModifiedError",
    "OctokitError",
    "RateLimitError",
    "RequestError",
    "ServerError",
    "UnauthorizedError",
    "ValidationError",
    "raise_for_status",
    "redact_authorization",
]
