"""Unit tests for directory root configuration."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from batchfiles.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("BATCH_OUTPUT_DIR", raising=False)
    monkeypatch.delenv("BATCH_TRIGGER_DIR", raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults_live_under_system_temp_directory() -> None:
    settings = Settings()

    temp_root = Path(tempfile.gettempdir()).resolve()
    assert settings.output_dir == temp_root / "batch" / "files"
    assert settings.trigger_dir == temp_root / "batch" / "triggers"


def test_environment_overrides_roots(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BATCH_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("BATCH_TRIGGER_DIR", str(tmp_path / "trig"))

    settings = Settings()

    assert settings.output_dir == (tmp_path / "out").resolve()
    assert settings.trigger_dir == (tmp_path / "trig").resolve()


def test_roots_are_expanded_and_made_absolute(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    settings = Settings(output_dir="~/files", trigger_dir="relative/triggers")

    assert settings.output_dir == (tmp_path / "files").resolve()
    assert settings.trigger_dir.is_absolute()
    assert settings.trigger_dir == (tmp_path / "relative" / "triggers").resolve()


def test_env_file_is_read(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(f"BATCH_OUTPUT_DIR={tmp_path / 'from-env-file'}\n", encoding="utf-8")

    settings = Settings()

    assert settings.output_dir == (tmp_path / "from-env-file").resolve()


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
