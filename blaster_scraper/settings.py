"""Run configuration for the scrapers.

Everything a crawl needs is carried by :class:`ScrapeConfig` and handed to
the scraper explicitly, so tests can build their own configuration with an
injected page list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from .urls import extract_base_domain

# Bundled page lists, one URL per line
DATA_DIR = Path(__file__).resolve().parent / "data"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/139.0.0.0 Safari/537.36"
)

# 15 minutes per PDF
DEFAULT_DOWNLOAD_TIMEOUT = 15 * 60

PDF_CONTENT_TYPES = ("binary/octet-stream", "application/pdf")


def load_start_urls(path: str | Path) -> list[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


@dataclass(frozen=True)
class ScrapeConfig:
    base_url: str
    start_urls: Tuple[str, ...] = ()
    output_dir: Path = field(default_factory=lambda: Path("PDFs"))
    user_agent: str = DEFAULT_USER_AGENT
    download_timeout: float = DEFAULT_DOWNLOAD_TIMEOUT
    # None waits forever, matching the plain page fetch
    page_timeout: Optional[float] = None
    allowed_content_types: Tuple[str, ...] = PDF_CONTENT_TYPES

    @property
    def archive_path(self) -> Path:
        """Local archive of fetched pages, ``<base-domain>.html`` in the cwd."""
        return Path(extract_base_domain(self.base_url) + ".html")


def default_config(**overrides) -> ScrapeConfig:
    """Configuration for blasterproducts.com with the bundled page list."""
    params = {
        "base_url": "https://blasterproducts.com",
        "start_urls": tuple(load_start_urls(DATA_DIR / "blaster_start_urls.txt")),
    }
    params.update(overrides)
    return ScrapeConfig(**params)
