"""Constructor options from the environment.

| Variable | Option |
|---|---|
| ``GITHUB_TOKEN``, ``GH_TOKEN`` | ``auth`` |
| ``GITHUB_API_URL`` | ``base_url`` |
| ``OCTOKIT_USER_AGENT`` | ``user_agent`` |
| ``OCTOKIT_TIME_ZONE`` | ``time_zone`` |

Variables that are unset are left out, so class defaults still apply.
"""

from typing import Any

from octokit_core.auth.credentials import CredentialResolver

TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")

OPTION_ENV_VARS = {
    "base_url": ("GITHUB_API_URL",),
    "user_agent": ("OCTOKIT_USER_AGENT",),
    "time_zone": ("OCTOKIT_TIME_ZONE",),
}


def options_from_env(resolver: CredentialResolver | None = None) -> dict[str, Any]:
    """Read constructor options from environment variables and .env."""
    resolver = resolver or CredentialResolver()
    options: dict[str, Any] = {}

    token = resolver.resolve(env_var_names=TOKEN_ENV_VARS)
    if token:
        options["auth"] = token

    for option, env_var_names in OPTION_ENV_VARS.items():
        value = resolver.resolve(env_var_names=env_var_names, mask_in_logs=False)
        if value:
            options[option] = value

    return options
