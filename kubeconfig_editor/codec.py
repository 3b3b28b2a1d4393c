"""Convert kubeconfig YAML to and from a ConfigGraph."""

from __future__ import annotations

import logging
from typing import Any

import yaml

from kubeconfig_editor.graph import AuthInfo, Cluster, ConfigGraph, Context

logger = logging.getLogger(__name__)

COLLECTION_KEYS = ("clusters", "users", "contexts")
CURRENT_CONTEXT_KEY = "current-context"


class ParseError(ValueError):
    """The document is not a structurally valid kubeconfig."""


def _entries(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    items = data.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise ParseError(f"{key} must be a list, got {type(items).__name__}")

    seen: set[str] = set()
    entries: list[dict[str, Any]] = []
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            raise ParseError(f"{key}[{idx}] must be a mapping")
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ParseError(f"{key}[{idx}] has no name")
        if name in seen:
            raise ParseError(f"duplicate name in {key}: {name}")
        seen.add(name)
        entries.append(item)
    return entries


def _bag(item: dict[str, Any], key: str, collection: str) -> dict[str, Any]:
    value = item.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ParseError(f"{collection} entry {item['name']!r}: {key} must be a mapping")
    return dict(value)


def _extra(item: dict[str, Any], *known: str) -> dict[str, Any]:
    return {k: v for k, v in item.items() if k not in known}


def _reference(attrs: dict[str, Any], key: str, context_name: str) -> str | None:
    value = attrs.pop(key, None)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ParseError(f"context {context_name!r}: {key} must be a string")
    return value


def load_document(data: Any, strict: bool = False) -> ConfigGraph:
    """
    Build a ConfigGraph from an already-parsed document.

    Args:
        data: Parsed YAML root (``None`` is treated as an empty document)
        strict: Reject contexts that reference missing clusters or users

    Raises:
        ParseError: Malformed structure or duplicate names
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError("kubeconfig root must be a mapping (dict)")

    graph = ConfigGraph()

    for item in _entries(data, "clusters"):
        name = item["name"]
        graph.clusters[name] = Cluster(
            name=name,
            cluster=_bag(item, "cluster", "clusters"),
            extra=_extra(item, "name", "cluster"),
        )

    for item in _entries(data, "users"):
        name = item["name"]
        graph.auth_infos[name] = AuthInfo(
            name=name,
            user=_bag(item, "user", "users"),
            extra=_extra(item, "name", "user"),
        )

    for item in _entries(data, "contexts"):
        name = item["name"]
        attrs = _bag(item, "context", "contexts")
        graph.contexts[name] = Context(
            name=name,
            cluster=_reference(attrs, "cluster", name),
            user=_reference(attrs, "user", name),
            attributes=attrs,
            extra=_extra(item, "name", "context"),
        )

    current = data.get(CURRENT_CONTEXT_KEY)
    if current is not None and not isinstance(current, str):
        raise ParseError(f"{CURRENT_CONTEXT_KEY} must be a string")
    graph.current_context = current or ""

    graph.extra = _extra(data, CURRENT_CONTEXT_KEY, *COLLECTION_KEYS)

    missing_clusters = graph.missing_cluster_names()
    missing_users = graph.missing_auth_info_names()
    if missing_clusters or missing_users:
        if strict:
            raise ParseError(
                "contexts reference missing entries "
                f"(clusters: {', '.join(missing_clusters) or 'none'}; "
                f"users: {', '.join(missing_users) or 'none'})"
            )
        logger.warning(
            f"Dangling references: clusters={missing_clusters} users={missing_users}"
        )

    return graph


def loads(text: str, strict: bool = False) -> ConfigGraph:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParseError(f"invalid YAML: {exc}") from exc
    return load_document(data, strict=strict)


def dump_document(graph: ConfigGraph) -> dict[str, Any]:
    """
    Plain-dict form of the graph, collections ordered by name.

    The three collections and current-context are always written, as kubectl does.
    """
    data: dict[str, Any] = dict(graph.extra)

    data["clusters"] = [
        {**c.extra, "name": c.name, "cluster": dict(c.cluster)} for c in graph.sorted_clusters()
    ]
    data["users"] = [
        {**u.extra, "name": u.name, "user": dict(u.user)} for u in graph.sorted_auth_infos()
    ]

    contexts: list[dict[str, Any]] = []
    for ctx in graph.sorted_contexts():
        attrs = dict(ctx.attributes)
        if ctx.cluster is not None:
            attrs["cluster"] = ctx.cluster
        if ctx.user is not None:
            attrs["user"] = ctx.user
        contexts.append({**ctx.extra, "name": ctx.name, "context": attrs})
    data["contexts"] = contexts

    data[CURRENT_CONTEXT_KEY] = graph.current_context
    return data


def dumps(graph: ConfigGraph) -> str:
    return yaml.safe_dump(
        dump_document(graph),
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )
