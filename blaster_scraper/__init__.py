"""Scrape the PDF data sheets linked from blasterproducts.com product pages."""

__version__ = "0.1.0"
