"""Testing utilities for Octokit clients and plugins.

Example:
    ```python
    from octokit_core import Octokit
    from octokit_core.testing import RecordingTransport


    async def test_get_user():
        transport = RecordingTransport(json={"login": "octocat"})
        octokit = Octokit(auth="secret123", request={"transport": transport})

        response = await octokit.request("GET /user")

        assert response.data == {"login": "octocat"}
        assert transport.last_request.headers["authorization"] == "token secret123"
    ```
"""

import json as jsonlib
from collections.abc import Callable
from typing import Any

import httpx


def create_json_response(status_code: int = 200, data: Any = None, headers: dict[str, str] | None = None) -> httpx.Response:
    """Build an ``application/json`` response; ``data=None`` gives an empty body."""
    if data is None:
        return httpx.Response(status_code, headers=headers)
    return httpx.Response(status_code, json=data, headers=headers)


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it receives.

    Args:
        handler: Called with each :class:`httpx.Request` to produce the
            response. Takes precedence over the canned response.
        status_code: Status of the canned response.
        json: Body of the canned response.
        headers: Headers of the canned response.
    """

    def __init__(
        self,
        handler: Callable[[httpx.Request], Any] | None = None,
        *,
        status_code: int = 200,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = handler
        self._status_code = status_code
        self._json = {} if json is None else json
        self._headers = headers
        super().__init__(self._record)

    def _record(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        if self._responder is not None:
            return self._responder(request)
        return create_json_response(self._status_code, self._json, self._headers)

    @property
    def last_request(self) -> httpx.Request:
        if not self.requests:
            raise AssertionError("No request was sent")
        return self.requests[-1]

    def last_json(self) -> Any:
        """Decode the body of the last request."""
        return jsonlib.loads(self.last_request.content)


__all__ = ["RecordingTransport", "create_json_response"]
