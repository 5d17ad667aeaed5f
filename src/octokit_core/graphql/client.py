"""GraphQL queries sent through the REST request executor."""

import re
from collections.abc import Mapping
from typing import Any

from octokit_core.errors.exceptions import GraphqlResponseError
from octokit_core.request.executor import Request
from octokit_core.request.executor import request as default_request

NON_VARIABLE_OPTIONS = frozenset(
    ["method", "base_url", "url", "headers", "request", "query", "media_type", "operation_name"]
)

FORBIDDEN_VARIABLE_OPTIONS = frozenset(["query", "method", "url"])

_GHES_V3_SUFFIX = re.compile(r"/api/v3/?$")


class GraphQL:
    """Send GraphQL queries.

    ``await graphql("query ($login: String!) { user(login: $login) { id } }", login="octocat")``

    Keyword arguments that are not request options become query variables.
    Returns the ``data`` member of the response.

    Raises:
        GraphqlResponseError: The response carried an ``errors`` list.
        ValueError: ``query``, ``method`` or ``url`` passed alongside a query string.
    """

    def __init__(self, request: Request, defaults: Mapping[str, Any] | None = None):
        self._request = request.defaults(
            {"method": "POST", "url": "/graphql", **(defaults or {})}
        )

    @property
    def endpoint(self):
        return self._request.endpoint

    async def __call__(
        self,
        query: str | Mapping[str, Any],
        parameters: Mapping[str, Any] | None = None,
        /,
        **params: Any,
    ) -> Any:
        parameters = {**(parameters or {}), **params}

        if isinstance(query, str):
            forbidden = FORBIDDEN_VARIABLE_OPTIONS.intersection(parameters)
            if forbidden:
                raise ValueError(
                    f"[graphql] {', '.join(sorted(forbidden))} cannot be used as variable names "
                    "when passing a query string"
                )
            options = {**parameters, "query": query}
        else:
            options = {**query, **parameters}

        request_options: dict[str, Any] = {}
        variables: dict[str, Any] = {}
        for key, value in options.items():
            if key in NON_VARIABLE_OPTIONS:
                request_options[key] = value
            else:
                variables[key] = value

        if "operation_name" in request_options:
            request_options["operationName"] = request_options.pop("operation_name")
        if variables:
            request_options["variables"] = variables

        base_url = options.get("base_url") or self.endpoint.default_options.get("base_url", "")
        if _GHES_V3_SUFFIX.search(base_url):
            request_options["url"] = _GHES_V3_SUFFIX.sub("/api/graphql", base_url)

        response = await self._request(request_options)

        if isinstance(response.data, dict) and "errors" in response.data:
            raise GraphqlResponseError(request_options, response.headers, response.data)

        return response.data.get("data") if isinstance(response.data, dict) else response.data

    def defaults(self, new_defaults: Mapping[str, Any]) -> "GraphQL":
        """Return a new executor with ``new_defaults`` merged over these."""
        return GraphQL(self._request.defaults(new_defaults))


def with_custom_request(request: Request) -> GraphQL:
    """Build a GraphQL executor on top of ``request`` and its defaults."""
    return GraphQL(request)


graphql = GraphQL(default_request)
