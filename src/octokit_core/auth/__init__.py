"""Authentication for Octokit clients.

This package provides:
- The binder that picks an instance's strategy (unauthenticated, token,
  or a custom ``auth_strategy``) and registers it on the request hook
- Static token authentication
- Multi-source credential resolution (value → env → .env → default)

Example:
    ```python
    from octokit_core.auth import CredentialResolver

    resolver = CredentialResolver()
    token = resolver.resolve(env_var_names=("GITHUB_TOKEN",), required=True)
    octokit = Octokit(auth=token)
    ```
"""

from octokit_core.auth.binder import Unauthenticated, bind_auth
from octokit_core.auth.credentials import CredentialResolver
from octokit_core.auth.exceptions import (
    AuthError,
    AuthStrategyError,
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from octokit_core.auth.token import TokenAuth, create_token_auth

__all__ = [
    "AuthError",
    "AuthStrategyError",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "TokenAuth",
    "Unauthenticated",
    "bind_auth",
    "create_token_auth",
]
