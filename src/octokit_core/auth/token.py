"""Static token authentication.

Personal access tokens, OAuth tokens, installation tokens and app JWTs are
all sent in the ``authorization`` header; JWTs use the ``bearer`` scheme,
everything else the ``token`` scheme.

Example:
    ```python
    auth = create_token_auth("ghp_abc123")
    await auth()
    # {"type": "token", "token": "ghp_abc123", "token_type": "oauth"}
    ```
"""

import re
from collections.abc import Awaitable, Callable
from typing import Any

from octokit_core.auth.exceptions import AuthError

_SCHEME_PREFIX = re.compile(r"^(token|bearer) +", re.IGNORECASE)
_INSTALLATION = re.compile(r"^(v1\.|ghs_)")
_USER_TO_SERVER = re.compile(r"^ghu_")


def _is_jwt(token: str) -> bool:
    return len(token.split(".")) == 3


def with_authorization_prefix(token: str) -> str:
    """Return the ``authorization`` header value for ``token``."""
    if _is_jwt(token):
        return f"bearer {token}"
    return f"token {token}"


def token_type(token: str) -> str:
    """Classify ``token`` as ``app``, ``installation``, ``user-to-server`` or ``oauth``."""
    if _is_jwt(token):
        return "app"
    if _INSTALLATION.match(token):
        return "installation"
    if _USER_TO_SERVER.match(token):
        return "user-to-server"
    return "oauth"


class TokenAuth:
    """Authentication strategy for a single static token."""

    def __init__(self, token: str):
        self.token = token

    async def __call__(self, *args: Any, **kwargs: Any) -> dict[str, str]:
        return {"type": "token", "token": self.token, "token_type": token_type(self.token)}

    async def hook(self, next_: Callable[[dict[str, Any]], Awaitable[Any]], options: dict[str, Any]) -> Any:
        """Send the request with the ``authorization`` header set."""
        headers = {**(options.get("headers") or {}), "authorization": with_authorization_prefix(self.token)}
        return await next_({**options, "headers": headers})

    def __repr__(self) -> str:
        return f"TokenAuth(token_type={token_type(self.token)!r})"


def create_token_auth(token: str) -> TokenAuth:
    """Create a :class:`TokenAuth`, stripping a leading ``token``/``bearer`` scheme.

    Raises:
        AuthError: ``token`` is empty.
        TypeError: ``token`` is not a string.
    """
    if not token:
        raise AuthError("No token passed to create_token_auth")
    if not isinstance(token, str):
        raise TypeError(f"Token passed to create_token_auth is not a string, got {type(token).__name__}")

    return TokenAuth(_SCHEME_PREFIX.sub("", token))
