"""Turn routes and parameters into concrete request options.

Routes follow the GitHub REST documentation, ``"METHOD /path/{variable}"``.
:meth:`Endpoint.merge` combines a route and its parameters with the
endpoint defaults; :meth:`Endpoint.parse` expands the URL, computes the
``accept`` header and decides what goes into the query string or body.

Example:
    ```python
    endpoint = Endpoint()
    endpoint("GET /repos/{owner}/{repo}", {"owner": "octokit", "repo": "core.py", "per_page": 10})
    # {"method": "GET",
    #  "url": "https://api.github.com/repos/octokit/core.py?per_page=10",
    #  "headers": {"accept": "application/vnd.github.v3+json", "user-agent": "..."}}
    ```
"""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from octokit_core.user_agent import USER_AGENT_TRAIL

DEFAULTS: dict[str, Any] = {
    "method": "GET",
    "base_url": "https://api.github.com",
    "headers": {
        "accept": "application/vnd.github.v3+json",
        "user-agent": USER_AGENT_TRAIL,
    },
    "media_type": {"format": ""},
}

# Keys that configure the request rather than feed the URL or body
NON_PARAMETER_KEYS = frozenset(["method", "base_url", "url", "headers", "request", "media_type"])

_URL_VARIABLE = re.compile(r"\{(\w+)\}")
_COLON_VARIABLE = re.compile(r":([a-z]\w+)")
_VND_FORMAT = re.compile(r"application/vnd(\.\w+)(\.v3)?(\.\w+)?(\+json)?$")
_ACCEPT_PREVIEW = re.compile(r"(?<![\w-])[\w-]+(?=-preview)")


def merge_deep(defaults: Mapping[str, Any], options: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``options`` into a copy of ``defaults``.

    Nested mappings are merged key by key; any other value, lists included,
    replaces the default.
    """
    result = dict(defaults)
    for key, value in options.items():
        if isinstance(value, Mapping):
            base = result.get(key)
            result[key] = merge_deep(base if isinstance(base, Mapping) else {}, value)
        else:
            result[key] = value
    return result


def _lowercase_keys(headers: Mapping[str, Any] | None) -> dict[str, Any]:
    return {key.lower(): value for key, value in (headers or {}).items() if value is not None}


def _strip_preview(preview: str) -> str:
    return preview.replace("-preview", "", 1)


def merge(
    defaults: Mapping[str, Any] | None,
    route: str | Mapping[str, Any] | None,
    parameters: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge a route and its parameters into ``defaults``.

    ``None`` parameter values are kept, so an explicit JSON ``null`` can be
    sent; only ``None`` header values are dropped.
    """
    if isinstance(route, str):
        method, _, url = route.partition(" ")
        options: dict[str, Any] = {"method": method, "url": url} if url else {"url": method}
        options.update(parameters or {})
    else:
        options = dict(route or {})
        options.update(parameters or {})

    options["headers"] = _lowercase_keys(options.get("headers"))
    merged = merge_deep(defaults or {}, options)

    if options.get("url") == "/graphql":
        media_type = merged.setdefault("media_type", {})
        previews = [_strip_preview(preview) for preview in media_type.get("previews") or []]
        default_previews = ((defaults or {}).get("media_type") or {}).get("previews") or []
        inherited = [_strip_preview(preview) for preview in default_previews]
        media_type["previews"] = [preview for preview in inherited if preview not in previews] + previews

    return merged


def _expand_url(url: str, parameters: Mapping[str, Any]) -> str:
    def replace(match: re.Match) -> str:
        value = parameters.get(match[1])
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return ",".join(quote(str(item), safe="") for item in value)
        return quote(str(value), safe="")

    return _URL_VARIABLE.sub(replace, url)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(item) for item in value)
    return str(value)


def add_query_parameters(url: str, parameters: Mapping[str, Any]) -> str:
    """Append ``parameters`` to ``url`` as a query string.

    The search parameter ``q`` keeps its ``+`` separators unencoded.
    """
    pairs = []
    for name, value in parameters.items():
        if value is None:
            continue
        if name == "q":
            encoded = "+".join(quote(part, safe="") for part in _query_value(value).split("+"))
        else:
            encoded = quote(_query_value(value), safe="")
        pairs.append(f"{name}={encoded}")

    if not pairs:
        return url
    separator = "&" if "?" in url else "?"
    return url + separator + "&".join(pairs)


def parse(options: Mapping[str, Any]) -> dict[str, Any]:
    """Resolve merged options into ``method``, ``url``, ``headers`` and ``body``."""
    method = str(options["method"]).upper()
    url = _COLON_VARIABLE.sub(r"{\1}", options.get("url") or "/")
    headers = dict(options.get("headers") or {})
    media_type = options.get("media_type") or {}

    parameters = {key: value for key, value in options.items() if key not in NON_PARAMETER_KEYS}
    url_variables = set(_URL_VARIABLE.findall(url))
    url = _expand_url(url, parameters)
    if not url.startswith("http"):
        url = options.get("base_url", "") + url

    remaining = {key: value for key, value in parameters.items() if key not in url_variables}

    accept = headers.get("accept", "")
    if not re.search(r"application/octet-stream", accept, re.IGNORECASE):
        format_ = media_type.get("format")
        if format_:
            accept = ",".join(
                _VND_FORMAT.sub(lambda m: f"application/vnd{m[1]}{m[2] or ''}.{format_}", part)
                for part in accept.split(",")
            )

        previews = media_type.get("previews") or []
        if url.endswith("/graphql") and previews:
            suffix = f".{format_}" if format_ else "+json"
            accept = ",".join(
                f"application/vnd.github.{preview}-preview{suffix}"
                for preview in _ACCEPT_PREVIEW.findall(accept) + list(previews)
            )
        if accept:
            headers["accept"] = accept

    body_set = False
    body = None
    if method in ("GET", "HEAD"):
        url = add_query_parameters(url, remaining)
    elif "data" in remaining:
        body, body_set = remaining["data"], True
    elif remaining:
        body, body_set = remaining, True

    if body_set and "content-type" not in headers:
        headers["content-type"] = "application/json; charset=utf-8"

    if method in ("PATCH", "PUT") and not body_set:
        body, body_set = "", True

    result: dict[str, Any] = {"method": method, "url": url, "headers": headers}
    if body_set:
        result["body"] = body
    if options.get("request"):
        result["request"] = options["request"]
    return result


class Endpoint:
    """Request options builder bound to a set of defaults."""

    def __init__(self, default_options: Mapping[str, Any] | None = None):
        self.default_options = merge(None, default_options if default_options is not None else DEFAULTS)

    def __call__(self, route: str | Mapping[str, Any], parameters: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return parse(self.merge(route, parameters))

    def merge(self, route: str | Mapping[str, Any] | None, parameters: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return merge(self.default_options, route, parameters)

    def parse(self, options: Mapping[str, Any]) -> dict[str, Any]:
        return parse(options)

    def defaults(self, new_defaults: Mapping[str, Any]) -> "Endpoint":
        """Return a new endpoint whose defaults are ``new_defaults`` merged over these."""
        return Endpoint(merge(self.default_options, new_defaults))
