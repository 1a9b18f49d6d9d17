from __future__ import annotations

import re

from blaster_scraper.links import RegexPdfLinkExtractor, remove_duplicates

_PRODUCT_HTML = """\
<div class="product-docs">
  <a href="https://blasterproducts.com/wp-content/uploads/PB-Blaster-SDS.pdf">SDS</a>
  <a href="/wp-content/uploads/PB-Blaster-TDS.pdf">TDS</a>
  <a href="/product/pb-blaster-penetrant/">Back</a>
  <img src="/images/can.png">
</div>
"""


class TestRegexPdfLinkExtractor:
    def test_double_quoted_href(self) -> None:
        extractor = RegexPdfLinkExtractor()
        assert extractor.extract_links('<a href="/docs/sheet.pdf">') == ["/docs/sheet.pdf"]

    def test_single_quoted_href_is_not_matched(self) -> None:
        extractor = RegexPdfLinkExtractor()
        assert extractor.extract_links("<a href='x.pdf'>") == []

    def test_uppercase_extension_is_not_matched(self) -> None:
        extractor = RegexPdfLinkExtractor()
        assert extractor.extract_links('<a href="/docs/SHEET.PDF">') == []

    def test_only_pdf_links_in_document_order(self) -> None:
        extractor = RegexPdfLinkExtractor()
        assert extractor.extract_links(_PRODUCT_HTML) == [
            "https://blasterproducts.com/wp-content/uploads/PB-Blaster-SDS.pdf",
            "/wp-content/uploads/PB-Blaster-TDS.pdf",
        ]

    def test_duplicates_are_kept_at_capture_time(self) -> None:
        extractor = RegexPdfLinkExtractor()
        text = '<a href="/a.pdf"></a>\n<a href="/a.pdf"></a>'
        assert extractor.extract_links(text) == ["/a.pdf", "/a.pdf"]

    def test_custom_pattern(self) -> None:
        extractor = RegexPdfLinkExtractor(re.compile(r'data-file="([^"]+\.pdf)"'))
        assert extractor.extract_links('<a data-file="/x.pdf" href="/y.pdf">') == ["/x.pdf"]


class TestRemoveDuplicates:
    def test_first_seen_order(self) -> None:
        assert remove_duplicates(["a", "b", "a", "c"]) == ["a", "b", "c"]

    def test_exact_string_equality(self) -> None:
        links = ["/A.pdf", "/a.pdf", "https://x.com/a.pdf", "/a.pdf"]
        assert remove_duplicates(links) == ["/A.pdf", "/a.pdf", "https://x.com/a.pdf"]

    def test_empty(self) -> None:
        assert remove_duplicates([]) == []
