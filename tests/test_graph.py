from kubeconfig_editor.graph import AuthInfo, Cluster, ConfigGraph, Context


def build_graph() -> ConfigGraph:
    graph = ConfigGraph(current_context="b")
    graph.clusters = {name: Cluster(name=name) for name in ("c2", "c1", "c3")}
    graph.auth_infos = {name: AuthInfo(name=name) for name in ("u1", "u2")}
    graph.contexts = {
        "b": Context(name="b", cluster="c1", user="u1"),
        "a": Context(name="a", cluster="c2", user="u1"),
        "d": Context(name="d", cluster="c9", user=""),
    }
    return graph


def test_reference_queries():
    graph = build_graph()

    assert graph.referenced_cluster_names() == {"c1", "c2", "c9"}
    assert graph.referenced_auth_info_names() == {"u1"}
    assert graph.remaining_context_names() == {"a", "b", "d"}


def test_missing_and_orphan_names():
    graph = build_graph()

    assert graph.missing_cluster_names() == ["c9"]
    assert graph.missing_auth_info_names() == []
    assert graph.orphan_cluster_names() == ["c3"]
    assert graph.orphan_auth_info_names() == ["u2"]


def test_sorted_views():
    graph = build_graph()

    assert [c.name for c in graph.sorted_clusters()] == ["c1", "c2", "c3"]
    assert [c.name for c in graph.sorted_contexts()] == ["a", "b", "d"]


def test_empty_graph_queries():
    graph = ConfigGraph()

    assert graph.referenced_cluster_names() == set()
    assert graph.referenced_auth_info_names() == set()
    assert graph.remaining_context_names() == set()
    assert graph.orphan_cluster_names() == []
