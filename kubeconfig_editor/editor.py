from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from kubeconfig_editor.graph import ConfigGraph, Context

logger = logging.getLogger(__name__)

ContextSelector = Callable[[Iterable[str]], str]


class UnknownContextError(LookupError):
    """Raised when selecting a context that is not in the graph."""

    def __init__(self, name: str) -> None:
        super().__init__(f"context not found: {name}")
        self.name = name


def first_sorted(names: Iterable[str]) -> str:
    """Default current-context policy: lexicographically smallest name, or empty."""
    return min(names, default="")


@dataclass
class DeleteResult:
    deleted: bool
    previous_current: str
    current_context: str

    @property
    def current_changed(self) -> bool:
        return self.previous_current != self.current_context


@dataclass
class PruneResult:
    removed_clusters: list[str]
    removed_users: list[str]
    missing_clusters: list[str]
    missing_users: list[str]

    @property
    def changed(self) -> bool:
        return bool(self.removed_clusters or self.removed_users)


class ContextEditor:
    """
    Mutations over a ConfigGraph that keep its references consistent.

    Args:
        graph: Graph to edit in place. The editor assumes exclusive ownership while it runs.
        select_current: Picks the new current-context from the remaining context names
            when the active one is deleted.
    """

    def __init__(self, graph: ConfigGraph, select_current: ContextSelector = first_sorted):
        self.graph = graph
        self.select_current = select_current

    def delete_context(self, name: str) -> DeleteResult:
        """
        Remove a context. Deleting a missing name is a no-op.

        current-context is only repointed when it named the deleted context.
        The referenced cluster and user are left in place; see remove_orphans.
        """
        graph = self.graph
        previous = graph.current_context

        if name not in graph.contexts:
            logger.info(f"Context {name!r} not found, nothing to delete")
            return DeleteResult(deleted=False, previous_current=previous, current_context=previous)

        del graph.contexts[name]
        logger.info(f"Deleted context {name!r}")

        if previous == name:
            graph.current_context = self.select_current(graph.remaining_context_names())
            if graph.current_context:
                logger.info(f"current-context switched to {graph.current_context!r}")
            else:
                logger.info("No contexts remain, current-context cleared")

        return DeleteResult(
            deleted=True,
            previous_current=previous,
            current_context=graph.current_context,
        )

    def remove_orphans(self) -> PruneResult:
        """
        Drop clusters and users that no context references.

        Contexts are never modified. References to missing clusters/users are
        reported in the result but not repaired.
        """
        graph = self.graph
        referenced_clusters = graph.referenced_cluster_names()
        referenced_users = graph.referenced_auth_info_names()

        removed_clusters = sorted(name for name in graph.clusters if name not in referenced_clusters)
        removed_users = sorted(name for name in graph.auth_infos if name not in referenced_users)

        for name in removed_clusters:
            del graph.clusters[name]
        for name in removed_users:
            del graph.auth_infos[name]

        if removed_clusters:
            logger.info(f"Removed unused clusters: {', '.join(removed_clusters)}")
        if removed_users:
            logger.info(f"Removed unused users: {', '.join(removed_users)}")

        return PruneResult(
            removed_clusters=removed_clusters,
            removed_users=removed_users,
            missing_clusters=graph.missing_cluster_names(),
            missing_users=graph.missing_auth_info_names(),
        )

    def delete_context_and_prune(self, name: str) -> tuple[DeleteResult, PruneResult]:
        return self.delete_context(name), self.remove_orphans()

    def upsert_context(self, name: str, cluster: str, user: str) -> Context:
        """Create a context or re-point an existing one, keeping its other attributes."""
        existing = self.graph.contexts.get(name)
        if existing is None:
            context = Context(name=name, cluster=cluster, user=user)
            self.graph.contexts[name] = context
            logger.info(f"Created context {name!r} ({cluster}, {user})")
            return context

        existing.cluster = cluster
        existing.user = user
        logger.info(f"Updated context {name!r} ({cluster}, {user})")
        return existing

    def use_context(self, name: str) -> None:
        if name not in self.graph.contexts:
            raise UnknownContextError(name)
        self.graph.current_context = name
        logger.info(f"current-context set to {name!r}")
