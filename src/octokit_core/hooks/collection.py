"""Named before/after/error/wrap hooks around asynchronous operations.

A :class:`HookCollection` holds, per hook name, four ordered lists of
interceptors. Invoking a name composes them around a terminal operation:

1. ``before`` interceptors run in registration order. Each receives the
   options and may return replacement options.
2. ``wrap`` interceptors are folded from the right, so the first registered
   wrap is outermost and the last registered wrap calls the operation
   directly. A wrap that never awaits ``next`` short-circuits the operation.
3. If the wrap chain raises, ``error`` interceptors run in registration
   order. The first one that returns recovers the call; one that raises
   replaces the exception seen by the next one.
4. ``after`` interceptors run in registration order and may return a
   replacement result.

Interceptors may be plain functions or coroutine functions.

Example:
    ```python
    from octokit_core.hooks import HookCollection

    hook = HookCollection()

    async def add_header(next_, options):
        options["headers"]["x-trace"] = "1"
        return await next_(options)

    hook.wrap("request", add_header)
    result = await hook("request", send, {"headers": {}})
    ```
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from functools import partial, reduce
from typing import Any

logger = logging.getLogger(__name__)

Operation = Callable[[Any], Awaitable[Any]]
Interceptor = Callable[..., Any]

KINDS = ("before", "error", "after", "wrap")


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


@dataclass
class HookPhase:
    """Interceptors registered for a single hook name."""

    before: list[Interceptor] = field(default_factory=list)
    error: list[Interceptor] = field(default_factory=list)
    after: list[Interceptor] = field(default_factory=list)
    wrap: list[Interceptor] = field(default_factory=list)

    def snapshot(self) -> "HookPhase":
        return HookPhase(list(self.before), list(self.error), list(self.after), list(self.wrap))


class HookCollection:
    """Registry of named hooks with onion-style composition."""

    def __init__(self) -> None:
        self._registry: dict[str, HookPhase] = {}

    def _register(self, name: str, kind: str, interceptor: Interceptor) -> None:
        if kind not in KINDS:
            raise ValueError(f"Unknown hook kind {kind!r}, expected one of {', '.join(KINDS)}")
        if not callable(interceptor):
            raise TypeError(f"{kind} hook for {name!r} must be callable, got {type(interceptor).__name__}")

        phase = self._registry.setdefault(name, HookPhase())
        getattr(phase, kind).append(interceptor)
        logger.debug(f"Registered {kind} hook {getattr(interceptor, '__name__', interceptor)!r} on {name!r}")

    def before(self, name: str, interceptor: Interceptor) -> None:
        """Run ``interceptor(options)`` before the operation."""
        self._register(name, "before", interceptor)

    def after(self, name: str, interceptor: Interceptor) -> None:
        """Run ``interceptor(result, options)`` after a successful operation."""
        self._register(name, "after", interceptor)

    def error(self, name: str, interceptor: Interceptor) -> None:
        """Run ``interceptor(exc, options)`` when the operation raises."""
        self._register(name, "error", interceptor)

    def wrap(self, name: str, interceptor: Interceptor) -> None:
        """Surround the operation with ``interceptor(next, options)``."""
        self._register(name, "wrap", interceptor)

    def remove(self, name: str, interceptor: Interceptor) -> None:
        """Unregister ``interceptor`` from every kind of hook ``name``.

        Removing an interceptor that was never registered is a no-op.
        """
        phase = self._registry.get(name)
        if phase is None:
            return
        for kind in KINDS:
            interceptors = getattr(phase, kind)
            interceptors[:] = [registered for registered in interceptors if registered is not interceptor]

    def registered(self, name: str) -> HookPhase:
        """Return a copy of the interceptors registered for ``name``."""
        return self._registry.get(name, HookPhase()).snapshot()

    def bind(self, name: str) -> Callable[[Operation, Any], Awaitable[Any]]:
        """Return ``hook(name, ...)`` with ``name`` fixed."""
        return partial(self.__call__, name)

    async def __call__(self, name: str, method: Operation, options: Any = None) -> Any:
        """Invoke ``method(options)`` through every interceptor of ``name``.

        Args:
            name: Hook name, e.g. ``"request"``.
            method: Terminal asynchronous operation.
            options: Argument threaded through the interceptors.

        Returns:
            The (possibly transformed or recovered) result of ``method``.
        """
        phase = self.registered(name)

        for interceptor in phase.before:
            replacement = await _maybe_await(interceptor(options))
            if replacement is not None:
                options = replacement

        chain = reduce(
            lambda next_, interceptor: partial(_call_wrap, interceptor, next_),
            reversed(phase.wrap),
            method,
        )

        try:
            result = await _maybe_await(chain(options))
        except Exception as exc:
            result = await _recover(phase.error, exc, options)

        for interceptor in phase.after:
            replacement = await _maybe_await(interceptor(result, options))
            if replacement is not None:
                result = replacement

        return result


async def _call_wrap(interceptor: Interceptor, next_: Operation, options: Any) -> Any:
    return await _maybe_await(interceptor(next_, options))


async def _recover(interceptors: list[Interceptor], exc: Exception, options: Any) -> Any:
    if not interceptors:
        raise exc

    current = exc
    for interceptor in interceptors:
        try:
            return await _maybe_await(interceptor(current, options))
        except Exception as replacement:
            current = replacement
    raise current
