"""Command-line entry point."""

from __future__ import annotations

import re
import sys

from .crawler import configure
from .report import print_report

_INT = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int | None:
    return int(text) if _INT.fullmatch(text) else None


def main(argv: list[str] | None = None) -> int:
    """Crawl a site and print a report of internal links."""
    arguments = sys.argv[1:] if argv is None else list(argv)
    if not arguments:
        print("no website provided")
        return 1
    if len(arguments) > 3:
        print("too many arguments provided")
        return 1

    base_url = arguments[0]
    max_concurrency = 5
    max_pages = 100

    if len(arguments) >= 2:
        value = _parse_int(arguments[1])
        if value is None:
            print("Invalid maxConcurrency value provided, using default of 5")
        else:
            max_concurrency = value
    if len(arguments) >= 3:
        value = _parse_int(arguments[2])
        if value is None:
            print("Invalid maxPages value provided, using default of 100")
        else:
            max_pages = value

    try:
        crawler = configure(base_url, max_concurrency, max_pages)
    except ValueError as exc:
        print(f"error configuring WebGopher: {exc}", file=sys.stderr)
        return 1

    print(f"starting crawl of {base_url}...")
    pages = crawler.crawl()
    print_report(pages, base_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())