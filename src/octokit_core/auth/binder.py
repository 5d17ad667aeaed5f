"""Choose and bind the authentication strategy of a client instance.

(1) Neither ``auth_strategy`` nor ``auth``: the instance is unauthenticated.
    ``octokit.auth()`` resolves to ``{"type": "unauthenticated"}`` and no
    request hook is registered.
(2) Only ``auth``: the token strategy from :mod:`octokit_core.auth.token`.
(3) ``auth_strategy``: called with the instance's own ``request`` and
    ``log``, the instance itself and its other constructor options, plus
    the ``auth`` sub-options. Strategies such as app or installation auth
    use the passed ``request`` to exchange credentials.

The strategy's ``hook`` is registered as a ``wrap`` on the ``"request"``
hook, so it can both add credentials before the request and react to the
response (refresh and resend on 401, for instance).
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from octokit_core.auth.exceptions import AuthStrategyError
from octokit_core.auth.token import create_token_auth
from octokit_core.hooks import HookCollection

if TYPE_CHECKING:
    from octokit_core.client import Octokit

logger = logging.getLogger(__name__)


class Unauthenticated:
    """Strategy of an instance without credentials."""

    async def __call__(self, *args: Any, **kwargs: Any) -> dict[str, str]:
        return {"type": "unauthenticated"}

    def __repr__(self) -> str:
        return "Unauthenticated()"


def _validate_strategy(strategy: Any, factory: Any) -> None:
    name = getattr(factory, "__name__", repr(factory))
    if not callable(strategy):
        raise AuthStrategyError(f"auth_strategy {name} returned {type(strategy).__name__}, which is not callable")
    if not callable(getattr(strategy, "hook", None)):
        raise AuthStrategyError(f"auth_strategy {name} returned a strategy without a callable hook")


def bind_auth(octokit: "Octokit", hook: HookCollection, options: Mapping[str, Any]) -> Any:
    """Create the strategy for ``options`` and register its request hook.

    Args:
        octokit: The instance being constructed; ``request`` and ``log``
            must already be set.
        hook: The instance's hook collection.
        options: Resolved constructor options.

    Returns:
        The strategy to expose as ``octokit.auth``.

    Raises:
        AuthStrategyError: ``auth_strategy`` returned an unusable strategy.
            Exceptions raised by ``auth_strategy`` itself propagate unchanged.
    """
    auth_strategy = options.get("auth_strategy")
    auth = options.get("auth")

    if auth_strategy is None:
        if not auth:
            logger.debug("No credentials configured, requests are unauthenticated")
            return Unauthenticated()
        strategy = create_token_auth(auth)
    else:
        other_options = {key: value for key, value in options.items() if key != "auth_strategy"}
        strategy_options: dict[str, Any] = {
            "request": octokit.request,
            "log": octokit.log,
            "octokit": octokit,
            "octokit_options": other_options,
        }
        if isinstance(auth, Mapping):
            strategy_options.update(auth)
        elif auth is not None:
            strategy_options["auth"] = auth

        strategy = auth_strategy(strategy_options)
        _validate_strategy(strategy, auth_strategy)

    hook.wrap("request", strategy.hook)
    logger.debug(f"Bound authentication strategy {strategy!r}")
    return strategy
