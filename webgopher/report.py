"""Reporting of crawl results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PageCount:
    """How many internal links point to a page."""

    url: str
    count: int


def sort_report(pages: dict[str, int]) -> list[PageCount]:
    """Order pages by descending count, then by URL ascending."""
    return sorted(
        (PageCount(url, count) for url, count in pages.items()),
        key=lambda page: (-page.count, page.url),
    )


def print_report(pages: dict[str, int], base_url: str) -> None:
    """Print the crawl report to standard output."""
    print("")
    print("=============================")
    print(f"REPORT for {base_url}")
    print("=============================")
    print("")
    for page in sort_report(pages):
        print(f"Found {page.count} internal links to {page.url}")