"""Callable request executor bound to endpoint defaults."""

from collections.abc import Mapping
from typing import Any

from octokit_core.request.endpoint import Endpoint
from octokit_core.request.fetch import fetch
from octokit_core.request.response import OctokitResponse


class Request:
    """Send REST API requests.

    ``await request("GET /repos/{owner}/{repo}", owner="octokit", repo="core.py")``

    If the merged options carry ``request["hook"]``, the hook is called as
    ``hook(send, options)`` and decides whether and how ``send`` runs.

    Attributes:
        endpoint: The :class:`Endpoint` holding this executor's defaults.
    """

    def __init__(self, endpoint: Endpoint | None = None):
        self.endpoint = endpoint or Endpoint()

    async def __call__(
        self,
        route: str | Mapping[str, Any],
        parameters: Mapping[str, Any] | None = None,
        /,
        **params: Any,
    ) -> OctokitResponse:
        options = self.endpoint.merge(route, {**(parameters or {}), **params})

        hook = (options.get("request") or {}).get("hook")
        if hook is None:
            return await self.send(options)
        return await hook(self.send, options)

    async def send(self, options: Mapping[str, Any]) -> OctokitResponse:
        """Parse merged ``options`` and execute them, bypassing the hook."""
        return await fetch(self.endpoint.parse(options))

    def defaults(self, new_defaults: Mapping[str, Any]) -> "Request":
        """Return a new executor with ``new_defaults`` merged over these."""
        return Request(self.endpoint.defaults(new_defaults))


request = Request()
