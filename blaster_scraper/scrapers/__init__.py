from .base import BaseScraper
from .blaster import BlasterScraper

__all__ = ["BaseScraper", "BlasterScraper"]
