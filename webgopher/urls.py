"""URL parsing, normalisation and link extraction."""

from __future__ import annotations

from html.parser import HTMLParser
from urllib.parse import SplitResult, unquote, urljoin, urlsplit, urlunsplit


def _parse_url(raw_url: str) -> SplitResult:
    """Split a URL, raising ValueError where it cannot be a valid URL."""
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw_url):
        raise ValueError(f"invalid control character in URL: {raw_url!r}")
    if raw_url.startswith(":"):
        raise ValueError(f"missing protocol scheme: {raw_url!r}")
    parts = urlsplit(raw_url)
    if not parts.scheme and not parts.netloc:
        first_segment = parts.path.split("/", 1)[0]
        if ":" in first_segment:
            raise ValueError(
                f"first path segment in URL cannot contain colon: {raw_url!r}"
            )
    # Accessing the port validates it.
    parts.port
    return parts


def normalize_url(input_url: str) -> str:
    """Reduce a URL to its lower-cased host and path without trailing slashes."""
    try:
        parts = _parse_url(input_url)
    except ValueError as exc:
        raise ValueError(f"error when parsing URL given: {exc}") from exc
    cleaned_path = unquote(parts.path).rstrip("/")
    return parts.netloc.lower() + cleaned_path.lower()


class _AnchorCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.hrefs: list[str] = []

    def handle_starttag(self, tag, attrs):
        if tag != "a":
            return
        for key, value in attrs:
            if key == "href":
                self.hrefs.append(value or "")
                break


def get_urls_from_html(html_body: str, raw_base_url: str) -> list[str]:
    """Return the absolute URLs of every anchor's href, in document order."""
    collector = _AnchorCollector()
    collector.feed(html_body)
    collector.close()

    urls = []
    for href in collector.hrefs:
        try:
            _parse_url(href)
            base = _parse_url(raw_base_url)
        except ValueError:
            continue
        urls.append(urljoin(urlunsplit(base), href))
    return urls