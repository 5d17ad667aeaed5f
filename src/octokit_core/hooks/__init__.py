"""Request interception hooks.

The client owns one :class:`HookCollection` and exposes it as
``octokit.hook``; the request executor invokes its ``"request"`` hook around
every HTTP call.
"""

from octokit_core.hooks.collection import HookCollection, HookPhase

__all__ = ["HookCollection", "HookPhase"]
