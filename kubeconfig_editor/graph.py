"""In-memory model of a kubeconfig document and its reference graph."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Cluster:
    name: str
    cluster: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class AuthInfo:
    name: str
    user: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class Context:
    """A named (cluster, user) pair. References are by name only; None means the key is absent."""

    name: str
    cluster: str | None
    user: str | None
    attributes: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class ConfigGraph:
    """
    Clusters, users and contexts keyed by name, plus the current-context selector.

    ``current_context`` may be empty or name a context that does not exist.
    ``extra`` keeps top-level fields the editor never touches (apiVersion, kind, ...).
    """

    clusters: dict[str, Cluster] = field(default_factory=dict)
    auth_infos: dict[str, AuthInfo] = field(default_factory=dict)
    contexts: dict[str, Context] = field(default_factory=dict)
    current_context: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    def iter_cluster_references(self) -> Iterator[str]:
        for context in self.contexts.values():
            if context.cluster:
                yield context.cluster

    def iter_auth_info_references(self) -> Iterator[str]:
        for context in self.contexts.values():
            if context.user:
                yield context.user

    def referenced_cluster_names(self) -> set[str]:
        return set(self.iter_cluster_references())

    def referenced_auth_info_names(self) -> set[str]:
        return set(self.iter_auth_info_references())

    def remaining_context_names(self) -> set[str]:
        return set(self.contexts)

    def missing_cluster_names(self) -> list[str]:
        """Cluster names referenced by a context but absent from the graph."""
        return sorted(self.referenced_cluster_names() - set(self.clusters))

    def missing_auth_info_names(self) -> list[str]:
        return sorted(self.referenced_auth_info_names() - set(self.auth_infos))

    def orphan_cluster_names(self) -> list[str]:
        """Clusters no context references."""
        return sorted(set(self.clusters) - self.referenced_cluster_names())

    def orphan_auth_info_names(self) -> list[str]:
        return sorted(set(self.auth_infos) - self.referenced_auth_info_names())

    def sorted_clusters(self) -> list[Cluster]:
        return [self.clusters[name] for name in sorted(self.clusters)]

    def sorted_auth_infos(self) -> list[AuthInfo]:
        return [self.auth_infos[name] for name in sorted(self.auth_infos)]

    def sorted_contexts(self) -> list[Context]:
        return [self.contexts[name] for name in sorted(self.contexts)]
