import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep the user's real settings and backups out of tests."""
    for key in (
        "KUBECONFIG",
        "KUBECONFIG_EDITOR_BACKUP",
        "KUBECONFIG_EDITOR_STRICT",
    ):
        # setenv first so teardown also undoes values written by load_dotenv
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.setenv("KUBECONFIG_EDITOR_CONFIG", str(tmp_path / "missing-config.toml"))
    monkeypatch.setenv("KUBECONFIG_EDITOR_BACKUP_DIR", str(tmp_path / "backups"))
    monkeypatch.chdir(tmp_path)
