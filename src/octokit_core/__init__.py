"""Octokit Core - extensible client for the GitHub REST and GraphQL APIs.

This library provides the base client that plugins build on:
- Request defaults (base URL, headers, media type negotiation)
- Pluggable authentication bound into a request hook
- Class builders for stacking defaults and plugins
- An ordered before/after/error/wrap hook chain around every request

Example:
    ```python
    from octokit_core import Octokit

    def hello(octokit, options):
        async def hello():
            response = await octokit.request("GET /user")
            return f"Hello, {response.data['login']}"

        return {"hello": hello}

    MyOctokit = Octokit.plugin(hello)
    octokit = MyOctokit(auth="ghp_...", user_agent="my-app/1.0")
    print(await octokit.hello())
    ```
"""

from octokit_core.client import Octokit, Plugin
from octokit_core.options import OctokitOptions
from octokit_core.version import VERSION

__version__ = VERSION

__all__ = ["Octokit", "OctokitOptions", "Plugin", "VERSION", "__version__"]
