"""Reading, atomically writing and backing up kubeconfig files."""

from __future__ import annotations

import datetime as dt
import logging
import os
import shutil
import tempfile
from pathlib import Path

from kubeconfig_editor.codec import dumps, loads
from kubeconfig_editor.graph import ConfigGraph

logger = logging.getLogger(__name__)

DEFAULT_KUBE_DIR = Path.home() / ".kube"
DEFAULT_BACKUP_DIR = DEFAULT_KUBE_DIR / "config_backup"
DEFAULT_KUBECONFIG = DEFAULT_KUBE_DIR / "config"

BACKUP_RETENTION_COUNT = 5


def resolve_kubeconfig_path(explicit: str | Path | None = None) -> Path:
    """
    Pick the kubeconfig file to edit.

    Order: explicit path, first entry of $KUBECONFIG, ~/.kube/config.
    """
    if explicit:
        return Path(explicit).expanduser()

    env_value = os.environ.get("KUBECONFIG", "")
    for entry in env_value.split(os.pathsep):
        entry = entry.strip()
        if entry:
            return Path(entry).expanduser()

    return DEFAULT_KUBECONFIG


def read_config(path: Path, strict: bool = False) -> ConfigGraph:
    """Load a kubeconfig file. OSError and ParseError propagate to the caller."""
    text = path.read_text(encoding="utf-8")
    logger.info(f"Loaded {path}")
    return loads(text, strict=strict)


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def write_config(path: Path, graph: ConfigGraph) -> None:
    """
    Write the graph to ``path`` via a temp file in the same directory and os.replace.

    A failed write leaves the existing file untouched.
    """
    text = dumps(graph)
    ensure_parent_dir(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.info(f"Wrote {path}")


def backup_file(path: Path, backup_dir: Path = DEFAULT_BACKUP_DIR) -> Path:
    """
    Copy ``path`` into ``backup_dir`` with a timestamp suffix.

    Only the newest BACKUP_RETENTION_COUNT backups of the same file are kept.
    """
    backup_dir.mkdir(parents=True, exist_ok=True)
    timestamp = dt.datetime.now().strftime("%Y%m%d%H%M%S")
    backup_path = backup_dir / f"{path.name}.bak.{timestamp}"
    shutil.copy2(path, backup_path)
    logger.info(f"Backup created at {backup_path}")

    backups = sorted(backup_dir.glob(f"{path.name}.bak.*"))
    if len(backups) > BACKUP_RETENTION_COUNT:
        for old_backup in backups[:-BACKUP_RETENTION_COUNT]:
            try:
                old_backup.unlink()
                logger.info(f"Removed old backup {old_backup}")
            except OSError as e:
                logger.warning(f"Failed to remove old backup {old_backup}: {e}")

    return backup_path
