"""Tests for authentication and credential exceptions."""

import pytest

from octokit_core.auth.exceptions import (
    AuthError,
    AuthStrategyError,
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from octokit_core.errors import OctokitError


class TestAuthError:
    """Test the authentication exception hierarchy."""

    def test_is_octokit_error(self):
        """Every auth error can be caught as OctokitError."""
        assert issubclass(AuthError, OctokitError)
        assert issubclass(AuthStrategyError, AuthError)
        assert issubclass(CredentialError, AuthError)

    def test_exception_message(self):
        """Test that exception message is preserved."""
        with pytest.raises(AuthStrategyError) as exc_info:
            raise AuthStrategyError("strategy has no hook")

        assert str(exc_info.value) == "strategy has no hook"


class TestCredentialNotFoundError:
    """Test CredentialNotFoundError exception."""

    def test_is_credential_error(self):
        """Test that CredentialNotFoundError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialNotFoundError("Test error")

    def test_env_var_names_attribute(self):
        """Test that the checked env var names are kept as a tuple."""
        error = CredentialNotFoundError("Test error", env_var_names=["GITHUB_TOKEN", "GH_TOKEN"])

        assert error.env_var_names == ("GITHUB_TOKEN", "GH_TOKEN")

    def test_env_var_names_optional(self):
        """Test that env_var_names defaults to empty."""
        assert CredentialNotFoundError("Test error").env_var_names == ()


class TestCredentialFileError:
    """Test CredentialFileError exception."""

    def test_is_credential_error(self):
        """Test that CredentialFileError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialFileError("Test error")

    def test_exception_message(self):
        """Test that exception message is preserved."""
        try:
            raise CredentialFileError("File not found: /path/to/file")
        except CredentialFileError as e:
            assert str(e) == "File not found: /path/to/file"
