"""GraphQL executor sharing the REST executor's defaults and hooks."""

from octokit_core.graphql.client import GraphQL, graphql, with_custom_request

__all__ = ["GraphQL", "graphql", "with_custom_request"]
