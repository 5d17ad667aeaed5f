"""The extensible Octokit client.

``Octokit`` is meant to be extended rather than modified. Two class-level
builders return new client classes and never touch the class they are
called on:

- ``Octokit.defaults(options_or_fn)`` adds a layer of constructor defaults
- ``Octokit.plugin(*plugins)`` adds plugins run on every new instance

Example:
    ```python
    def paginate(octokit, options):
        async def paginate(route, **params):
            ...
        return {"paginate": paginate}

    MyOctokit = Octokit.plugin(paginate).defaults({"user_agent": "my-app/1.0"})
    octokit = MyOctokit(auth="ghp_...")
    response = await octokit.request("GET /user")
    ```
"""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Protocol

from octokit_core.auth.binder import bind_auth
from octokit_core.config import options_from_env
from octokit_core.graphql.client import GraphQL, with_custom_request
from octokit_core.hooks import HookCollection
from octokit_core.log import Log, create_logger
from octokit_core.options import DefaultsLayer, build_request_defaults, resolve_options
from octokit_core.request.executor import Request
from octokit_core.request.executor import request as default_request
from octokit_core.version import VERSION

logger = logging.getLogger(__name__)


class Plugin(Protocol):
    """A plugin is called once per instance, after authentication is bound.

    Keys of the returned mapping become attributes of the instance; a later
    plugin silently replaces what an earlier one set under the same name.
    """

    def __call__(self, octokit: "Octokit", options: dict[str, Any]) -> Mapping[str, Any] | None: ...


class Octokit:
    """Base client for the GitHub REST and GraphQL APIs.

    Args:
        base_url: API root, defaults to ``https://api.github.com``.
        user_agent: Prepended to the library user agent.
        previews: API previews to request via the ``accept`` header.
        time_zone: Sent as the ``time-zone`` header.
        auth: Token, or sub-options for ``auth_strategy``.
        auth_strategy: Factory replacing token authentication.
        log: Logger, see :func:`octokit_core.log.create_logger`.
        request: Executor options (``transport``, ``client``, ``timeout``).

    Attributes:
        request: REST executor bound to the instance defaults and hook.
        graphql: GraphQL executor sharing the same defaults and hook.
        log: Logger with ``debug``, ``info``, ``warn`` and ``error``.
        hook: The instance's :class:`HookCollection`.
        auth: Authentication strategy; ``await octokit.auth()`` describes it.
    """

    VERSION: ClassVar[str] = VERSION
    plugins: ClassVar[tuple[Plugin, ...]] = ()
    _option_layers: ClassVar[tuple[DefaultsLayer, ...]] = ()

    request: Request
    graphql: GraphQL
    log: Log
    hook: HookCollection
    auth: Any

    @classmethod
    def _derive(cls, **namespace: Any) -> type["Octokit"]:
        namespace.setdefault("__module__", cls.__module__)
        namespace.setdefault("__qualname__", cls.__qualname__)
        namespace.setdefault("__doc__", cls.__doc__)
        return type(cls.__name__, (cls,), namespace)

    @classmethod
    def defaults(cls, defaults: DefaultsLayer) -> type["Octokit"]:
        """Return a new client class with an extra layer of constructor defaults.

        A mapping is merged under the constructor options (user agents are
        joined). A callable receives the constructor options and returns
        the options to use instead.
        """
        return cls._derive(_option_layers=cls._option_layers + (defaults,))

    @classmethod
    def plugin(cls, *new_plugins: Plugin) -> type["Octokit"]:
        """Return a new client class with ``new_plugins`` appended.

        Plugins already registered on this class, compared by identity, are
        skipped, so ``Octokit.plugin(p).plugin(p)`` runs ``p`` once.
        """
        plugins = list(cls.plugins)
        for new_plugin in new_plugins:
            if not any(new_plugin is registered for registered in plugins):
                plugins.append(new_plugin)
        return cls._derive(plugins=tuple(plugins))

    @classmethod
    def from_env(cls, **options: Any) -> "Octokit":
        """Instantiate with options read from the environment.

        Explicit keyword options take precedence; see :mod:`octokit_core.config`.
        """
        return cls(**{**options_from_env(), **options})

    def __init__(self, **options: Any) -> None:
        options = resolve_options(type(self)._option_layers, options)

        hook = HookCollection()
        request_defaults = build_request_defaults(options, hook.bind("request"))

        self.request = default_request.defaults(request_defaults)
        self.graphql = with_custom_request(self.request).defaults(request_defaults)
        self.log = create_logger(options.get("log"))
        self.hook = hook
        self.auth = bind_auth(self, hook, options)

        for plugin in type(self).plugins:
            extension = plugin(self, options)
            if extension:
                for name, value in extension.items():
                    setattr(self, name, value)

        logger.debug(f"Created {type(self).__name__} with {len(type(self).plugins)} plugin(s)")
