"""Logger facade handed to plugins and authentication strategies.

``octokit.log`` always has ``debug``, ``info``, ``warn`` and ``error``.
Whatever the caller passes as ``log=`` is completed with defaults:
``debug`` and ``info`` are silent, ``warn`` and ``error`` go to the
``octokit_core`` stdlib logger (stderr unless logging is configured).

Example:
    ```python
    import logging

    octokit = Octokit(log=logging.getLogger("my-app"))
    octokit.log.warn("rate limit low")  # -> my-app WARNING

    octokit = Octokit(log={"debug": print})
    octokit.log.debug("hello")  # printed
    octokit.log.info("ignored")  # silent
    ```
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

logger = logging.getLogger("octokit_core")

LOG_METHODS = ("debug", "info", "warn", "error")


def _noop(*args: Any, **kwargs: Any) -> None:
    return None


def _default_method(name: str) -> Callable[..., Any]:
    if name == "warn":
        return logger.warning
    if name == "error":
        return logger.error
    return _noop


class Log:
    """Four-method logger wrapping a caller-supplied logger.

    Attributes not among the four methods are looked up on the wrapped
    object, so ``octokit.log.child(...)`` still works for loggers that
    provide it.
    """

    def __init__(self, target: Any = None, **methods: Callable[..., Any]):
        self._target = target
        for name in LOG_METHODS:
            setattr(self, name, methods.get(name) or _default_method(name))

    def __getattr__(self, name: str) -> Any:
        target = self.__dict__.get("_target")
        if target is None or name.startswith("__"):
            raise AttributeError(name)
        if isinstance(target, Mapping):
            try:
                return target[name]
            except KeyError:
                raise AttributeError(name) from None
        return getattr(target, name)


def _lookup(log: Any, name: str) -> Callable[..., Any] | None:
    if isinstance(log, Mapping):
        method = log.get(name)
    else:
        method = getattr(log, name, None)
    return method if callable(method) else None


def create_logger(log: Any = None) -> Log:
    """Complete a partial logger with default methods.

    Args:
        log: ``None``, a :class:`logging.Logger`, a mapping of method names
            to callables, or any object exposing some of ``debug``,
            ``info``, ``warn`` and ``error``.

    Returns:
        A :class:`Log` with all four methods.
    """
    if isinstance(log, Log):
        return log

    if log is None:
        return Log()

    if isinstance(log, logging.Logger):
        return Log(log, debug=log.debug, info=log.info, warn=log.warning, error=log.error)

    methods = {name: method for name in LOG_METHODS if (method := _lookup(log, name)) is not None}
    if "warn" not in methods and (warning := _lookup(log, "warning")) is not None:
        methods["warn"] = warning
    return Log(log, **methods)
