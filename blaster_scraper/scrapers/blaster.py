from typing import List, Optional

import requests

from ..archive import PageArchive
from ..links import LinkExtractor, RegexPdfLinkExtractor, remove_duplicates
from ..results import DownloadResult
from ..settings import ScrapeConfig, default_config
from .base import BaseScraper


class BlasterScraper(BaseScraper):
    def __init__(
        self,
        config: Optional[ScrapeConfig] = None,
        session: Optional[requests.Session] = None,
        extractor: Optional[LinkExtractor] = None,
    ):
        super().__init__("blaster", config or default_config(), session)
        self.extractor = extractor or RegexPdfLinkExtractor()
        self.archive = PageArchive(self.config.archive_path, self.logger)

    def archive_pages(self, start_urls: List[str]) -> None:
        # every page is appended, failed fetches included (as an empty line)
        for url in start_urls:
            result = self.fetch(url)
            self.archive.append(result.text)

    def find_pdf_links(self) -> List[str]:
        """
        Extract PDF links from the archive file, not from the responses:
        the archive is what gets scanned.
        """
        text = self.archive.read()
        links = remove_duplicates(self.extractor.extract_links(text))
        self.logger.info(f"Found {len(links)} unique PDF link(s) in {self.archive.path}")
        return links

    def crawl(self, start_urls: List[str]) -> List[DownloadResult]:
        """
        Fetch every start page into the archive, pull the PDF links out of
        it and download each valid one, strictly one after another.
        """
        self.ensure_output_dir()
        self.archive.remove_stale()
        self.archive_pages(start_urls)

        results: List[DownloadResult] = []
        for link in self.find_pdf_links():
            url = self.make_absolute(link)
            if not self.is_downloadable(url):
                continue
            results.append(self.save_pdf(url))

        return results
