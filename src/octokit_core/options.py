"""Constructor option layering and per-instance request defaults.

Options reach :class:`~octokit_core.client.Octokit` in layers:

1. library defaults (:data:`octokit_core.request.endpoint.DEFAULTS`)
2. class defaults added with ``Octokit.defaults(...)``, one layer per call
3. keyword options given to the constructor
4. per-call parameters given to ``octokit.request(...)``

This module resolves layers 2 and 3 into constructor options and turns
those into the request defaults of layer 1 for the instance's executors.
Layer 4 is merged by the executor itself.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypedDict

from octokit_core.request.endpoint import DEFAULTS
from octokit_core.user_agent import USER_AGENT_TRAIL

logger = logging.getLogger(__name__)

DefaultsLayer = Mapping[str, Any] | Callable[[dict[str, Any]], Mapping[str, Any]]


class OctokitOptions(TypedDict, total=False):
    """Recognized constructor options.

    Plugins may read additional keys of their own.
    """

    base_url: str
    user_agent: str
    previews: Sequence[str]
    time_zone: str
    auth: Any
    auth_strategy: Callable[[dict[str, Any]], Any]
    log: Any
    request: Mapping[str, Any]


def merge_defaults(defaults: DefaultsLayer, options: Mapping[str, Any]) -> dict[str, Any]:
    """Apply one class defaults layer to constructor options.

    A callable layer receives the options and its return value is used as
    is. A mapping layer is shallow-merged under the options, except that
    two user agents are joined as ``"<options> <defaults>"``.
    """
    if callable(defaults):
        return dict(defaults(dict(options)) or {})

    merged = {**defaults, **options}
    if options.get("user_agent") and defaults.get("user_agent"):
        merged["user_agent"] = f"{options['user_agent']} {defaults['user_agent']}"
    return merged


def resolve_options(layers: Sequence[DefaultsLayer], options: Mapping[str, Any]) -> dict[str, Any]:
    """Apply class defaults layers, most recently added first."""
    resolved = dict(options)
    for layer in reversed(layers):
        resolved = merge_defaults(layer, resolved)
    return resolved


def build_request_defaults(options: Mapping[str, Any], hook: Callable[..., Any]) -> dict[str, Any]:
    """Build the request defaults shared by an instance's executors.

    Args:
        options: Resolved constructor options.
        hook: Trigger for the instance's ``"request"`` hook, stored as
            ``request["hook"]`` where the executor looks for it.
    """
    user_agent = options.get("user_agent")
    headers = {"user-agent": f"{user_agent} {USER_AGENT_TRAIL}" if user_agent else USER_AGENT_TRAIL}

    if options.get("time_zone"):
        headers["time-zone"] = options["time_zone"]

    request_defaults = {
        "base_url": options.get("base_url") or DEFAULTS["base_url"],
        "headers": headers,
        "request": {**(options.get("request") or {}), "hook": hook},
        "media_type": {
            "previews": list(options.get("previews") or []),
            "format": "",
        },
    }

    logger.debug(f"Request defaults: base_url={request_defaults['base_url']} user-agent={headers['user-agent']}")
    return request_defaults
