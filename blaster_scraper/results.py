"""Outcome types returned by the fetch and download steps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


@dataclass(frozen=True)
class FetchResult:
    """Body of one page fetch, or the reason it could not be fetched."""

    url: str
    text: str = ""
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DownloadStatus(str, Enum):
    DOWNLOADED = "downloaded"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class DownloadResult:
    url: str
    path: Optional[str]
    status: DownloadStatus
    reason: str = ""
    bytes_written: int = 0
    sha256: Optional[str] = None

    def as_row(self) -> Dict[str, object]:
        # metadata CSV row
        return {
            "url": self.url,
            "path": self.path,
            "status": self.status.value,
            "reason": self.reason,
            "bytes": self.bytes_written,
            "sha256": self.sha256,
        }


def summarize(results: List[DownloadResult]) -> Dict[str, int]:
    """Count results per status, every status present even when zero."""
    counts = {status.value: 0 for status in DownloadStatus}
    for r in results:
        counts[r.status.value] += 1
    return counts
