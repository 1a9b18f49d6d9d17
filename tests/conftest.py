from __future__ import annotations

from pathlib import Path

import pytest

from blaster_scraper.settings import ScrapeConfig

BASE_URL = "https://blasterproducts.com"


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run inside a temp dir so the archive file lands there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config(workdir: Path) -> ScrapeConfig:
    return ScrapeConfig(base_url=BASE_URL, output_dir=workdir / "PDFs")
