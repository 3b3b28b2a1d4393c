"""Command-line interface for kubeconfig-editor."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from kubeconfig_editor import __version__
from kubeconfig_editor.codec import ParseError
from kubeconfig_editor.config import EditorSettings, build_settings
from kubeconfig_editor.editor import ContextEditor, PruneResult, UnknownContextError
from kubeconfig_editor.graph import ConfigGraph
from kubeconfig_editor.store import backup_file, read_config, write_config

logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="kubeconfig-editor",
    help="Delete kubeconfig contexts and prune unused clusters/users.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

DryRunOption = Annotated[
    bool, typer.Option("--dry-run", help="Show changes without writing the file")
]
NoBackupOption = Annotated[
    bool, typer.Option("--no-backup", help="Skip the backup copy before writing")
]


def format_names(names: list[str]) -> str:
    return ", ".join(names) if names else "none"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"kubeconfig-editor {__version__}")
        raise typer.Exit()


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]{message}[/red]", highlight=False)
    return typer.Exit(1)


def _settings(ctx: typer.Context) -> EditorSettings:
    return ctx.obj


def _load(settings: EditorSettings) -> ConfigGraph:
    path = settings.kubeconfig
    if not path.is_file():
        raise _fail(f"Missing kubeconfig file: {path}")
    try:
        graph = read_config(path, strict=settings.strict)
    except ParseError as exc:
        raise _fail(f"Invalid kubeconfig {path}: {exc}") from exc
    except OSError as exc:
        raise _fail(f"Error: {exc}") from exc

    console.print(f"Kubeconfig: {path}", highlight=False)
    return graph


def _print_counts(graph: ConfigGraph) -> None:
    console.print(
        f"Contexts: {len(graph.contexts)} | Clusters: {len(graph.clusters)} "
        f"| Users: {len(graph.auth_infos)}",
        highlight=False,
    )


def _print_prune(result: PruneResult) -> None:
    console.print(f"Unused clusters removed: {format_names(result.removed_clusters)}", highlight=False)
    console.print(f"Unused users removed: {format_names(result.removed_users)}", highlight=False)
    _warn_missing(result.missing_clusters, result.missing_users)


def _warn_missing(missing_clusters: list[str], missing_users: list[str]) -> None:
    if not (missing_clusters or missing_users):
        return
    console.print("[yellow]Warning: contexts reference missing clusters/users.[/yellow]")
    if missing_clusters:
        console.print(f"  Missing clusters: {format_names(missing_clusters)}", highlight=False)
    if missing_users:
        console.print(f"  Missing users: {format_names(missing_users)}", highlight=False)


def _persist(settings: EditorSettings, graph: ConfigGraph, dry_run: bool, no_backup: bool) -> None:
    _print_counts(graph)
    if dry_run:
        console.print("dry-run enabled: no changes made.")
        return

    path = settings.kubeconfig
    try:
        if settings.backup and not no_backup and path.exists():
            backup_path = backup_file(path, settings.backup_dir)
            console.print(f"Backup saved: {backup_path}", highlight=False)
        write_config(path, graph)
    except OSError as exc:
        raise _fail(f"Error: {exc}") from exc
    console.print("done.")


@app.callback()
def main(
    ctx: typer.Context,
    kubeconfig: Annotated[
        str | None,
        typer.Option("--kubeconfig", help="Kubeconfig file (default: $KUBECONFIG or ~/.kube/config)"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Reject files whose contexts reference missing entries"),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """Keep kubeconfig contexts, clusters and users consistent."""
    if verbose:
        logging.getLogger().setLevel(logging.INFO)
    try:
        ctx.obj = build_settings(kubeconfig=kubeconfig, strict=True if strict else None)
    except ValueError as exc:
        raise _fail(f"Invalid settings: {exc}") from exc
    logger.info(f"Using settings: {ctx.obj}")


@app.command("delete-context")
def delete_context(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Context to delete")],
    keep_orphans: Annotated[
        bool,
        typer.Option("--keep-orphans", help="Do not remove clusters/users left unreferenced"),
    ] = False,
    dry_run: DryRunOption = False,
    no_backup: NoBackupOption = False,
) -> None:
    """Delete a context and, unless told otherwise, the clusters/users only it used."""
    settings = _settings(ctx)
    graph = _load(settings)
    editor = ContextEditor(graph)

    result = editor.delete_context(name)
    if result.deleted:
        console.print(f"Deleted context: {name}", highlight=False)
    else:
        console.print(f"[yellow]Context not found: {name}[/yellow]", highlight=False)
    if result.current_changed:
        console.print(
            f"current-context: {result.previous_current} -> {result.current_context or '(none)'}",
            highlight=False,
        )

    changed = result.deleted
    if not keep_orphans:
        prune_result = editor.remove_orphans()
        _print_prune(prune_result)
        changed = changed or prune_result.changed

    if not changed:
        console.print("No changes.")
        return
    _persist(settings, graph, dry_run, no_backup)


@app.command()
def prune(
    ctx: typer.Context,
    dry_run: DryRunOption = False,
    no_backup: NoBackupOption = False,
) -> None:
    """Remove clusters and users that no context references."""
    settings = _settings(ctx)
    graph = _load(settings)

    result = ContextEditor(graph).remove_orphans()
    _print_prune(result)

    if not result.changed:
        console.print("No changes.")
        return
    _persist(settings, graph, dry_run, no_backup)


@app.command("set-context")
def set_context(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Context to create or update")],
    cluster: Annotated[str, typer.Option("--cluster", help="Cluster name")],
    user: Annotated[str, typer.Option("--user", help="User (auth-info) name")],
    prune_orphans: Annotated[
        bool,
        typer.Option("--prune", help="Also remove clusters/users left unreferenced"),
    ] = False,
    dry_run: DryRunOption = False,
    no_backup: NoBackupOption = False,
) -> None:
    """Create a context or point an existing one at another cluster/user."""
    settings = _settings(ctx)
    graph = _load(settings)

    missing_clusters = [] if cluster in graph.clusters else [cluster]
    missing_users = [] if user in graph.auth_infos else [user]
    if settings.strict and (missing_clusters or missing_users):
        raise _fail(
            f"Unknown cluster/user for context {name}: "
            f"{format_names(missing_clusters + missing_users)}"
        )

    editor = ContextEditor(graph)
    editor.upsert_context(name, cluster, user)
    console.print(f"Context {name}: cluster={cluster} user={user}", highlight=False)
    _warn_missing(missing_clusters, missing_users)

    if prune_orphans:
        _print_prune(editor.remove_orphans())
    else:
        orphans = graph.orphan_cluster_names() + graph.orphan_auth_info_names()
        if orphans:
            console.print(f"[dim]Unreferenced entries: {format_names(orphans)} (run prune)[/dim]")

    _persist(settings, graph, dry_run, no_backup)


@app.command("use-context")
def use_context(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Context to make current")],
    dry_run: DryRunOption = False,
    no_backup: NoBackupOption = False,
) -> None:
    """Set current-context."""
    settings = _settings(ctx)
    graph = _load(settings)

    try:
        ContextEditor(graph).use_context(name)
    except UnknownContextError as exc:
        raise _fail(f"Context not found: {exc.name}") from exc

    console.print(f"current-context: {name}", highlight=False)
    _persist(settings, graph, dry_run, no_backup)


@app.command()
def show(ctx: typer.Context) -> None:
    """List contexts and report unreferenced or missing entries."""
    settings = _settings(ctx)
    graph = _load(settings)

    table = Table(title="Contexts", show_header=True, header_style="bold cyan")
    table.add_column("Current", justify="center", width=8)
    table.add_column("Name", style="green")
    table.add_column("Cluster")
    table.add_column("User")
    for context in graph.sorted_contexts():
        marker = "*" if context.name == graph.current_context else ""
        table.add_row(marker, context.name, context.cluster or "", context.user or "")
    console.print(table)

    _print_counts(graph)
    console.print(f"Unreferenced clusters: {format_names(graph.orphan_cluster_names())}", highlight=False)
    console.print(f"Unreferenced users: {format_names(graph.orphan_auth_info_names())}", highlight=False)
    if graph.current_context and graph.current_context not in graph.contexts:
        console.print(f"[yellow]current-context {graph.current_context} does not exist[/yellow]")
    _warn_missing(graph.missing_cluster_names(), graph.missing_auth_info_names())


if __name__ == "__main__":
    app()
