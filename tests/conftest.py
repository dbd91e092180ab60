from __future__ import annotations

from pathlib import Path

import pytest

from batchfiles.config import Settings
from batchfiles.services import LocalFileService


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(output_dir=tmp_path / "files", trigger_dir=tmp_path / "triggers")


@pytest.fixture
def service(settings: Settings) -> LocalFileService:
    return LocalFileService(settings)


@pytest.fixture
def populated(service: LocalFileService) -> list[Path]:
    """Five stored files spread over nested directories."""
    files = [
        service.create_file("reports", "daily.csv"),
        service.create_file("reports", "weekly.csv"),
        service.create_file("imports/2024", "orders.xml"),
        service.create_file(None, "top.txt"),
        service.create_file("imports", "customers.xml"),
    ]
    for file in files:
        file.write_text("a,b,c", encoding="utf-8")
    return files
