"""Concurrent crawling of the pages of one site."""

from __future__ import annotations

import threading
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from urllib.parse import urlunsplit

from .fetch import FetchError, get_html
from .urls import _parse_url, get_urls_from_html, normalize_url


def _hostname(netloc: str) -> str:
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host[1:].partition("]")[0]
    return host.partition(":")[0]


class Crawler:
    """Crawls pages on the base URL's host, counting links to each page."""

    def __init__(self, base_url: str, max_concurrency: int, max_pages: int) -> None:
        try:
            self._base = _parse_url(base_url)
        except ValueError as exc:
            raise ValueError(f"error parsing provided base URL: {exc}") from exc
        if max_concurrency < 1:
            raise ValueError("max concurrency must be at least 1")
        self.base_url = base_url
        self.max_concurrency = max_concurrency
        self.max_pages = max_pages
        self.pages: dict[str, int] = {}
        self._lock = threading.Lock()
        self._announced = False

    def add_page_visit(self, normalized_url: str) -> bool:
        """Count a visit; return True if the page had not been seen before."""
        with self._lock:
            if normalized_url in self.pages:
                self.pages[normalized_url] += 1
                return False
            self.pages[normalized_url] = 1
            return True

    def is_max_pages_reached(self) -> bool:
        with self._lock:
            return len(self.pages) >= self.max_pages

    def crawl_page(self, raw_current_url: str) -> list[str]:
        """Visit one page and return the URLs found on it to crawl next."""
        if self.is_max_pages_reached():
            with self._lock:
                if not self._announced:
                    self._announced = True
                    print("max pages reached, exiting WebGopher early...")
            return []

        try:
            current = _parse_url(raw_current_url)
        except ValueError as exc:
            print(f"error trying to parse current URL: {raw_current_url}\n{exc}")
            return []

        if _hostname(current.netloc) != _hostname(self._base.netloc):
            return []

        try:
            normalized = normalize_url(raw_current_url)
        except ValueError as exc:
            print(f"error trying to normalize the current URL: {raw_current_url}\n{exc}")
            return []

        if not self.add_page_visit(normalized):
            return []

        print(f"getting HTML of {raw_current_url}...")
        try:
            current_html = get_html(raw_current_url)
        except FetchError as exc:
            print(f"error trying to get HTML of current URL: {raw_current_url}\n{exc}")
            return []

        urls = get_urls_from_html(current_html, urlunsplit(self._base))
        for url in urls:
            print(f"crawling to next URL: {url}...")
        return urls

    def crawl(self) -> dict[str, int]:
        """Crawl from the base URL until no pages remain; return the counts."""
        with ThreadPoolExecutor(max_workers=self.max_concurrency) as pool:
            pending = {pool.submit(self.crawl_page, self.base_url)}
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    for url in future.result():
                        pending.add(pool.submit(self.crawl_page, url))
        with self._lock:
            return dict(self.pages)


def configure(base_url: str, max_concurrency: int, max_pages: int) -> Crawler:
    """Build a crawler for a base URL."""
    return Crawler(base_url, max_concurrency, max_pages)