"""Response model returned by the request executor."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class OctokitResponse:
    """A completed HTTP exchange.

    Attributes:
        status: HTTP status code.
        url: Final request URL.
        headers: Response headers with lowercase names.
        data: Decoded JSON body, text, raw bytes, or None for empty responses.
    """

    status: int
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    data: Any = None
