"""Settings loading.

Priority: CLI args → environment variables → .env → config.toml → defaults
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from kubeconfig_editor.store import DEFAULT_BACKUP_DIR, resolve_kubeconfig_path

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "kubeconfig-editor" / "config.toml"
CONFIG_FILE_ENV = "KUBECONFIG_EDITOR_CONFIG"

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


@dataclass
class EditorSettings:
    """Runtime settings for the CLI."""

    kubeconfig: Path
    backup_dir: Path = DEFAULT_BACKUP_DIR
    backup: bool = True
    strict: bool = False


@dataclass
class ConfigSources:
    """Collect values per source, then merge."""

    cli: dict[str, object] = field(default_factory=dict)
    env: dict[str, object] = field(default_factory=dict)
    toml: dict[str, object] = field(default_factory=dict)

    def _merged(self) -> dict[str, object]:
        """Merge in toml < env < cli order."""
        merged: dict[str, object] = {}
        merged.update(self.toml)
        merged.update(self.env)
        merged.update(self.cli)
        return merged

    def build(self) -> EditorSettings:
        m = self._merged()
        kubeconfig = m.get("kubeconfig")
        backup_dir = m.get("backup_dir")
        return EditorSettings(
            kubeconfig=resolve_kubeconfig_path(str(kubeconfig) if kubeconfig else None),
            backup_dir=Path(str(backup_dir)).expanduser() if backup_dir else DEFAULT_BACKUP_DIR,
            backup=parse_bool(m.get("backup", True)),
            strict=parse_bool(m.get("strict", False)),
        )


def parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def load_env_vars() -> dict[str, object]:
    """Read settings from environment variables."""
    result: dict[str, object] = {}
    mapping = {
        "KUBECONFIG_EDITOR_BACKUP_DIR": "backup_dir",
        "KUBECONFIG_EDITOR_BACKUP": "backup",
        "KUBECONFIG_EDITOR_STRICT": "strict",
    }
    for env_key, config_key in mapping.items():
        val = os.environ.get(env_key, "").strip()
        # empty counts as unset
        if val:
            result[config_key] = val

    for entry in os.environ.get("KUBECONFIG", "").split(os.pathsep):
        entry = entry.strip()
        if entry:
            result["kubeconfig"] = entry
            break
    return result


def load_toml_file(path: Path) -> dict[str, object]:
    """Read a TOML settings file; a missing file yields no settings."""
    if not path.exists():
        return {}
    with open(path, "rb") as f:
        data = tomllib.load(f)
    section = data.get("kubeconfig-editor", data)
    return {
        key: section[key]
        for key in ("kubeconfig", "backup_dir", "backup", "strict")
        if key in section
    }


def build_settings(
    *,
    kubeconfig: str | None = None,
    strict: bool | None = None,
    backup: bool | None = None,
    config_file: Path | None = None,
    env_file: Path | None = None,
) -> EditorSettings:
    """Load settings from every source and merge them."""
    if env_file and env_file.exists():
        load_dotenv(env_file)
    elif Path(".env").exists():
        load_dotenv(Path(".env"))

    sources = ConfigSources()

    toml_path = config_file or Path(os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE))
    sources.toml = load_toml_file(Path(toml_path).expanduser())

    sources.env = load_env_vars()

    # CLI args (only those explicitly given)
    cli: dict[str, object] = {}
    if kubeconfig is not None:
        cli["kubeconfig"] = kubeconfig
    if strict is not None:
        cli["strict"] = strict
    if backup is not None:
        cli["backup"] = backup
    sources.cli = cli

    return sources.build()
