"""REST request executor.

Example:
    ```python
    from octokit_core.request import request

    response = await request("GET /orgs/{org}", org="octokit")
    print(response.status, response.data["id"])
    ```
"""

from octokit_core.request.endpoint import DEFAULTS, Endpoint
from octokit_core.request.executor import Request, request
from octokit_core.request.fetch import fetch
from octokit_core.request.response import OctokitResponse

__all__ = [
    "DEFAULTS",
    "Endpoint",
    "OctokitResponse",
    "Request",
    "fetch",
    "request",
]
