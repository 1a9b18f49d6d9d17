import os
import csv
import sys
import logging
import argparse
from pathlib import Path
from typing import Optional

from .results import summarize
from .settings import default_config, load_start_urls, ScrapeConfig

METADATA_FIELDS = ["url", "path", "status", "reason", "bytes", "sha256"]


def setup_logger(verbose: bool) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger("blaster_scraper")
    logger.setLevel(level)

    # one stdout handler per process; a repeat call only changes the level
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


def write_metadata(path: str, rows: list[dict]) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=METADATA_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)


def run_scraper(
    name: str,
    scraper_cls,
    config: ScrapeConfig,
    metadata_path: Optional[str] = None,
) -> list:
    logger = logging.getLogger("blaster_scraper")
    scraper = scraper_cls(config=config)
    results = scraper.crawl(list(config.start_urls))

    counts = summarize(results)
    logger.info(
        f"[{name}] {len(results)} PDF(s): {counts['downloaded']} downloaded, "
        f"{counts['skipped']} skipped, {counts['failed']} failed"
    )

    if metadata_path:
        try:
            write_metadata(metadata_path, [r.as_row() for r in results])
            logger.info(f"[{name}] Saved {len(results)} PDF metadata rows to {metadata_path}")
        except OSError as e:
            logger.error(f"[{name}] Could not write metadata to {metadata_path}: {e}")

    return results


def build_config(args: argparse.Namespace) -> ScrapeConfig:
    overrides = {}
    if args.start_urls:
        overrides["start_urls"] = tuple(load_start_urls(args.start_urls))
    if args.output_dir:
        overrides["output_dir"] = Path(args.output_dir)
    return default_config(**overrides)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Download the PDF data sheets linked from Blaster product pages."
    )
    parser.add_argument(
        "vendor",
        nargs="?",
        default="blaster",
        choices=["blaster"],
        help="Which site scraper to run."
    )
    parser.add_argument("--start-urls", default=None, help="File with one page URL per line.")
    parser.add_argument("--output-dir", default=None, help="Where PDFs are written (default: PDFs).")
    parser.add_argument("--metadata", default=None, help="Write a CSV row per PDF to this path.")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging.")
    args = parser.parse_args(argv)

    setup_logger(args.verbose)

    jobs = {
        "blaster": lambda: __import__(
            "blaster_scraper.scrapers.blaster", fromlist=["BlasterScraper"]
        ).BlasterScraper,
    }

    scraper_cls = jobs[args.vendor]()
    run_scraper(
        name=args.vendor,
        scraper_cls=scraper_cls,
        config=build_config(args),
        metadata_path=args.metadata,
    )


if __name__ == "__main__":
    main()
