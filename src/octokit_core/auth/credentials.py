"""Multi-source credential resolution.

Resolves a GitHub token (or any other configuration value) from several
sources with priority ordering:

1. Explicitly provided value
2. Environment variables, first one set wins
3. .env file (python-dotenv, loaded into the environment)
4. Default value

Example:
    ```python
    from octokit_core.auth import CredentialResolver

    resolver = CredentialResolver()

    token = resolver.resolve(env_var_names=("GITHUB_TOKEN", "GH_TOKEN"), required=True)

    # Token kept in a file, path optionally taken from an env var
    token = resolver.resolve_from_file(file_path="~/.config/gh/token", env_var_name="GITHUB_TOKEN_FILE")
    ```

Security Considerations:
    - Credentials are never logged (masked with ***)
    - Only source information is logged (env var name, file path)
    - File-based credentials have whitespace stripped
"""

import logging
import os
from collections.abc import Sequence
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from octokit_core.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolve credentials from multiple sources with priority ordering.

    Attributes:
        _dotenv_loaded: Whether the .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_names: Sequence[str] = (),
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a credential from multiple sources.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_names: Environment variables to check, in order. Empty
                values count as unset.
            default: Default value if not found elsewhere.
            required: Raise CredentialNotFoundError instead of returning None.
            mask_in_logs: Mask the value in debug logs. Disable only for
                non-sensitive values such as URLs.

        Returns:
            Resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and not found in any source.
        """
        if isinstance(env_var_names, str):
            env_var_names = (env_var_names,)

        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        else:
            for name in env_var_names:
                if os.environ.get(name):
                    result = os.environ[name]
                    source = f"environment variable '{name}'"
                    break

        if result is None and default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_names:
                error_msg += f" (checked env vars: {', '.join(env_var_names)})"
            raise CredentialNotFoundError(error_msg, env_var_names=env_var_names)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file.

        The path supports ``~`` and ``$VAR`` expansion and may itself come
        from ``env_var_name`` when ``file_path`` is not given.

        Returns:
            File contents stripped of whitespace, or None if the file is
            missing and not required.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_names=(env_var_name,), mask_in_logs=False)

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content
