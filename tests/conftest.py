"""Pytest configuration and shared fixtures for octokit-core tests."""

import pytest

from octokit_core.testing import RecordingTransport


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear environment variables the client reads.

    This prevents a developer's GITHUB_TOKEN from leaking into tests.
    """
    import os

    test_prefixes = ("TEST_", "GITHUB_", "GH_", "OCTOKIT_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def transport():
    """A transport answering every request with ``200 {"ok": true}``."""
    return RecordingTransport(json={"ok": True})
