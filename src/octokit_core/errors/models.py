"""GitHub error body models."""

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class ErrorDetail:
    """Error body as returned by the GitHub REST API.

    See: https://docs.github.com/en/rest/overview/resources-in-the-rest-api#client-errors
    """

    message: str | None = None  # Human-readable summary
    documentation_url: str | None = None  # Link to the relevant docs page
    status: str | None = None  # Status code echoed by some endpoints
    errors: list[Any] | None = None  # Field-level validation errors

    # Any other members of the body
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_data(cls, data: Any) -> "ErrorDetail | None":
        """Parse a decoded response body.

        Args:
            data: Response body, already decoded from JSON (or text)

        Returns:
            ErrorDetail object or None if the body has no recognizable members
        """
        if not isinstance(data, dict):
            return None

        standard_fields = {"message", "documentation_url", "status", "errors"}
        if not any(field in data for field in standard_fields):
            return None

        status = data.get("status")
        extensions = {k: v for k, v in data.items() if k not in standard_fields}

        return cls(
            message=data.get("message"),
            documentation_url=data.get("documentation_url"),
            status=str(status) if status is not None else None,
            errors=data.get("errors"),
            extensions=extensions if extensions else None,
        )

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        message = self.message or "Unknown API error"

        if self.errors:
            message += ": " + ", ".join(
                error if isinstance(error, str) else json.dumps(error) for error in self.errors
            )

        if self.documentation_url:
            message += f" - {self.documentation_url}"

        return message
