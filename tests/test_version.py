from __future__ import annotations

from infra import version as version_mod


def test_get_app_version_prefers_env_override(monkeypatch, tmp_path):
    version_file = tmp_path / "app_version.txt"
    version_file.write_text("1.4.0", encoding="utf-8")
    monkeypatch.setattr(version_mod, "_VERSION_FILE", version_file)
    monkeypatch.setenv("CATALOG_APP_VERSION", " 9.9.9 ")

    assert version_mod.get_app_version() == "9.9.9"


def test_get_app_version_reads_version_file(monkeypatch, tmp_path):
    version_file = tmp_path / "app_version.txt"
    version_file.write_text("1.4.0\n", encoding="utf-8")
    monkeypatch.setattr(version_mod, "_VERSION_FILE", version_file)
    monkeypatch.delenv("CATALOG_APP_VERSION", raising=False)

    assert version_mod.get_app_version() == "1.4.0"


def test_get_app_version_falls_back_when_nothing_is_stamped(monkeypatch, tmp_path):
    monkeypatch.setattr(version_mod, "_VERSION_FILE", tmp_path / "missing.txt")
    monkeypatch.delenv("CATALOG_APP_VERSION", raising=False)
    monkeypatch.setattr(version_mod, "_version_from_metadata", lambda: None)

    assert version_mod.get_app_version() == version_mod._DEFAULT_APP_VERSION


def test_get_app_version_uses_installed_metadata_without_stamp(monkeypatch, tmp_path):
    monkeypatch.setattr(version_mod, "_VERSION_FILE", tmp_path / "missing.txt")
    monkeypatch.delenv("CATALOG_APP_VERSION", raising=False)
    monkeypatch.setattr(version_mod.metadata, "version", lambda name: "3.0.0")

    assert version_mod.get_app_version() == "3.0.0"
