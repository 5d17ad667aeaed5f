"""Send parsed request options over HTTP with httpx.

Executor options are read from the ``request`` key of the parsed options:

- ``client``: an existing :class:`httpx.AsyncClient` to send with
- ``transport``: an httpx transport for a short-lived client (tests use
  :class:`httpx.MockTransport` here)
- ``timeout``: forwarded to :class:`httpx.AsyncClient`

Redirects (301 for moved repositories, 302 for archive downloads) are
followed, so callers see the final response.
"""

import json
import logging
from typing import Any

import httpx

from octokit_core.errors.exceptions import RequestError
from octokit_core.errors.handler import raise_for_status, redact_authorization
from octokit_core.request.response import OctokitResponse

logger = logging.getLogger(__name__)


def _encode_body(body: Any) -> str | bytes | None:
    if body is None or isinstance(body, (str, bytes)):
        return body
    # None values inside the body are sent as JSON null
    return json.dumps(body)


def _decode_body(response: httpx.Response) -> Any:
    if response.status_code in (204, 205):
        return None

    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            return response.text

    if not content_type or content_type.startswith("text/") or "charset=" in content_type.lower():
        return response.text

    return response.content


async def _send(client: httpx.AsyncClient, options: dict[str, Any]) -> httpx.Response:
    return await client.request(
        options["method"],
        options["url"],
        headers=options.get("headers"),
        content=_encode_body(options.get("body")),
        follow_redirects=True,
    )


async def fetch(options: dict[str, Any]) -> OctokitResponse:
    """Execute a parsed request.

    Args:
        options: Output of :func:`octokit_core.request.endpoint.parse`.

    Returns:
        The parsed response for any status below 400 except 304.

    Raises:
        RequestError: On error statuses (status-specific subclass) or when
            the request could not be sent (status 500).
    """
    request_options = options.get("request") or {}
    client = request_options.get("client")

    try:
        if client is not None:
            response = await _send(client, options)
        else:
            client_kwargs: dict[str, Any] = {"transport": request_options.get("transport")}
            if "timeout" in request_options:
                client_kwargs["timeout"] = request_options["timeout"]
            async with httpx.AsyncClient(**client_kwargs) as short_lived:
                response = await _send(short_lived, options)
    except httpx.HTTPError as e:
        raise RequestError(str(e) or type(e).__name__, status_code=500, request=redact_authorization(options)) from e

    headers = dict(response.headers)
    octokit_response = OctokitResponse(
        status=response.status_code,
        url=str(response.url),
        headers=headers,
        data=_decode_body(response),
    )

    if "deprecation" in headers:
        sunset = headers.get("sunset")
        removal = f" It is scheduled to be removed on {sunset}" if sunset else ""
        logger.warning(f'"{options["method"]} {options["url"]}" is deprecated.{removal}')

    raise_for_status(octokit_response, options)

    logger.debug(f"{options['method']} {options['url']} - {octokit_response.status}")
    return octokit_response
