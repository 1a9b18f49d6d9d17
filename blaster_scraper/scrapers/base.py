import os
import hashlib
import logging
from time import monotonic

import requests

from ..results import DownloadResult, DownloadStatus, FetchResult
from ..settings import ScrapeConfig
from ..urls import is_url_valid, resolve_link, url_to_filename


class BaseScraper:
    # basic initialization / HTTP session
    def __init__(self, name: str, config: ScrapeConfig, session: requests.Session | None = None):
        self.name = name.lower()
        self.config = config
        self.logger = logging.getLogger(f"blaster_scraper.{self.name}")
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": config.user_agent})
        self.pdf_dir = str(config.output_dir)

    def ensure_output_dir(self) -> None:
        if os.path.isdir(self.pdf_dir):
            return
        try:
            os.makedirs(self.pdf_dir, mode=0o755, exist_ok=True)
        except OSError as e:
            # later writes into the directory fail and get logged one by one
            self.logger.error(f"Could not create output directory {self.pdf_dir}: {e}")

    # HTTP helpers
    def fetch(self, url: str) -> FetchResult:
        # single GET, no retries, body is kept whatever the status
        self.logger.info(f"Scraping {url}")
        try:
            resp = self.session.get(url, timeout=self.config.page_timeout)
            with resp:
                # raw bytes, not resp.text: requests falls back to ISO-8859-1 for
                # text/html without a charset and would mangle UTF-8 pages
                text = resp.content.decode("utf-8", errors="surrogateescape")
                return FetchResult(url=url, text=text, status_code=resp.status_code)
        except requests.RequestException as e:
            self.logger.error(f"Request error for {url}: {e}")
            return FetchResult(url=url, error=str(e))

    # URL helpers
    def make_absolute(self, link: str) -> str:
        return resolve_link(link, self.config.base_url)

    def is_downloadable(self, url: str) -> bool:
        if is_url_valid(url):
            return True
        self.logger.debug(f"Discarding invalid URL: {url!r}")
        return False

    # PDF saving
    def _failed(self, url: str, path: str, reason: str) -> DownloadResult:
        return DownloadResult(url=url, path=path, status=DownloadStatus.FAILED, reason=reason)

    def save_pdf(self, url: str) -> DownloadResult:
        # download and save one PDF to disk
        # existing files are never fetched again
        filename = url_to_filename(url)
        filepath = os.path.join(self.pdf_dir, filename)

        if os.path.isfile(filepath):
            self.logger.info(f"File already exists, skipping: {filepath}")
            return DownloadResult(
                url=url, path=filepath, status=DownloadStatus.SKIPPED, reason="file exists"
            )

        # requests' timeout only bounds connect and each read, so the whole
        # transfer is also held to a deadline
        timeout = self.config.download_timeout
        deadline = monotonic() + timeout
        try:
            resp = self.session.get(url, timeout=timeout, stream=True)
            with resp:
                if resp.status_code != 200:
                    status = f"{resp.status_code} {resp.reason or ''}".strip()
                    self.logger.error(f"Download failed for {url}: {status}")
                    return self._failed(url, filepath, f"HTTP {status}")

                content_type = resp.headers.get("Content-Type", "")
                if not any(t in content_type for t in self.config.allowed_content_types):
                    self.logger.error(f"Invalid content type for {url}: {content_type} (expected PDF)")
                    return self._failed(url, filepath, f"content type {content_type!r}")

                buf = bytearray()
                for chunk in resp.iter_content(chunk_size=8192):
                    buf.extend(chunk)
                    if monotonic() > deadline:
                        self.logger.error(f"Failed to download {url}: exceeded {timeout}s")
                        return self._failed(url, filepath, f"timed out after {timeout}s")
                content = bytes(buf)
        except requests.RequestException as e:
            self.logger.error(f"Failed to download {url}: {e}")
            return self._failed(url, filepath, str(e))

        if not content:
            self.logger.error(f"Downloaded 0 bytes for {url}; not creating file")
            return self._failed(url, filepath, "empty body")

        try:
            with open(filepath, "wb") as f:
                f.write(content)
        except OSError as e:
            self.logger.error(f"Failed to write PDF to file for {url}: {e}")
            return self._failed(url, filepath, str(e))

        self.logger.info(f"Successfully downloaded {len(content)} bytes: {url} → {filepath}")
        return DownloadResult(
            url=url,
            path=filepath,
            status=DownloadStatus.DOWNLOADED,
            bytes_written=len(content),
            sha256=hashlib.sha256(content).hexdigest(),
        )

    # implementing per site
    def crawl(self, start_urls: list[str]) -> list[DownloadResult]:
        """
        Main entrypoint. Implement in subclass:
        Given start URLs, find and download all relevant PDFs.
        Should return one DownloadResult per attempted PDF.
        """
        raise NotImplementedError
