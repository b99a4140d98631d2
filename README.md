# webgopher

webgopher crawls a website, starting from a base URL, and reports how many
times each internal page is linked to. It follows only links whose host name
matches the base URL's, fetches each page once, and works on several pages at
a time using a pool of threads. It needs nothing beyond the standard library.

## Installation

```
pip install .
```

## Usage

```
webgopher <base-url> [max-concurrency] [max-pages]
```

- `base-url`: the page to start from, for example `https://example.com`.
- `max-concurrency`: how many pages may be worked on at once (default 5).
  It must be at least 1.
- `max-pages`: how many distinct pages to record before no more are visited
  (default 100).

If `max-concurrency` or `max-pages` is not a whole number, a message is
printed and the default is used. With no base URL, or more than three
arguments, a message is printed and the command exits with status 1. If the
base URL cannot be parsed, or `max-concurrency` is below 1, an error is
written to standard error and the command exits with status 1.

While it runs, the command prints each page it fetches, each link it is about
to follow, and any page it could not fetch. Once the page limit is reached it
prints `max pages reached, exiting WebGopher early...` once and visits no
further pages.

At the end a report lists every page recorded, most linked first, and pages
with the same count in alphabetical order:

```
=============================
REPORT for https://example.com
=============================

Found 7 internal links to example.com/about
Found 5 internal links to example.com
```

Pages are recorded in a normalized form: the host (with any port) and the
path, lower-cased, with percent-escapes in the path decoded, and with the
scheme, query, fragment and trailing slashes dropped. Links found on any page
are resolved against the base URL.

## Using it from Python

```python
from webgopher.crawler import Crawler, configure
from webgopher.report import PageCount, print_report, sort_report
from webgopher.urls import get_urls_from_html, normalize_url

crawler = configure("https://example.com", 5, 100)
pages = crawler.crawl()          # {"example.com": 3, "example.com/about": 2, ...}
print_report(pages, "https://example.com")

sort_report({"a.example.com": 1, "b.example.com": 2})
# [PageCount(url="b.example.com", count=2), PageCount(url="a.example.com", count=1)]

normalize_url("https://Example.com/path/")  # "example.com/path"
get_urls_from_html('<a href="/about">About</a>', "https://example.com")
# ["https://example.com/about"]
```

- `configure(base_url, max_concurrency, max_pages)` returns a `Crawler` and
  raises `ValueError` if the base URL cannot be parsed or `max_concurrency` is
  below 1.
- `Crawler.crawl()` crawls from the base URL until no work is left and returns
  a copy of the page counts; `Crawler.pages` holds the counts as well.
- `Crawler.crawl_page(url)` visits a single page and returns the URLs found
  on it; `Crawler.add_page_visit(normalized_url)` and
  `Crawler.is_max_pages_reached()` are the bookkeeping it uses.
- `normalize_url` raises `ValueError` for a URL it cannot parse.
  `get_urls_from_html` returns the `href` of every `<a>` tag in document order,
  skipping any that cannot be parsed as a URL.
- `webgopher.fetch.get_html(url)` fetches one page and returns its body,
  raising `FetchError` when the request fails, the server answers with an
  error status, or the response's `Content-Type` is not `text/html`.

## Limits

webgopher does not read `robots.txt`, does not throttle its requests beyond
the concurrency limit, and does not save its results: the report is printed to
standard output only.

## Running the tests

```
pip install ".[test]"
pytest
```