"""User agent string for outgoing requests."""

import platform

from octokit_core.version import VERSION


def get_user_agent() -> str:
    """Describe the running interpreter and platform.

    Returns:
        A string such as ``"Python/3.12.1 (Linux; x86_64)"``.
    """
    return f"Python/{platform.python_version()} ({platform.system()}; {platform.machine()})"


USER_AGENT_TRAIL = f"octokit-core.py/{VERSION} {get_user_agent()}"
