"""PDF link extraction from archived page text."""

from __future__ import annotations

import re
from typing import Iterable, List, Protocol


class LinkExtractor(Protocol):
    def extract_links(self, text: str) -> List[str]:
        ...


class RegexPdfLinkExtractor:
    """
    Finds ``href="....pdf"`` attributes with a regular expression.

    Matching is case-sensitive and only double-quoted attributes are seen:
    ``href='x.pdf'`` and ``HREF="X.PDF"`` are not picked up.
    """

    PATTERN = re.compile(r'href="([^"]+\.pdf)"')

    def __init__(self, pattern: re.Pattern | None = None):
        self.pattern = pattern or self.PATTERN

    def extract_links(self, text: str) -> List[str]:
        return [m.group(1) for m in self.pattern.finditer(text)]


def remove_duplicates(items: Iterable[str]) -> List[str]:
    # keep first occurrence, exact string match
    seen = set()
    unique: List[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        unique.append(item)
    return unique
