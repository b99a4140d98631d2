"""Crawl a website and report how often each internal page is linked."""

__version__ = "0.1.0"

__all__ = ["__version__"]