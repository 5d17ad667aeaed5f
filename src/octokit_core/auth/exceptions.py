"""Exceptions raised while setting up authentication.

Example:
    ```python
    from octokit_core.auth.exceptions import CredentialNotFoundError

    if not token:
        raise CredentialNotFoundError("GitHub token not found", env_var_names=("GITHUB_TOKEN",))
    ```
"""

from collections.abc import Sequence

from octokit_core.errors.exceptions import OctokitError


class AuthError(OctokitError):
    """Base exception for authentication setup errors."""

    pass


class AuthStrategyError(AuthError):
    """Raised when an ``auth_strategy`` returns an unusable strategy.

    A strategy must be callable (``await octokit.auth()``) and expose a
    callable ``hook(next, options)``. Construction of the client fails
    and no instance is returned.
    """

    pass


class CredentialError(AuthError):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_names: The environment variable names that were checked.

    Example:
        ```python
        try:
            token = resolver.resolve(env_var_names=("GITHUB_TOKEN", "GH_TOKEN"), required=True)
        except CredentialNotFoundError as e:
            print(f"Set one of: {', '.join(e.env_var_names)}")
        ```
    """

    def __init__(self, message: str, env_var_names: Sequence[str] = ()):
        super().__init__(message)
        self.env_var_names = tuple(env_var_names)


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass
