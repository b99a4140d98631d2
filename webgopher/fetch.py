"""Fetching HTML pages over HTTP."""

from __future__ import annotations

from urllib.error import HTTPError, URLError
from urllib.request import urlopen


class FetchError(Exception):
    """Raised when a page cannot be fetched as HTML."""


def get_html(raw_url: str) -> str:
    """GET a URL and return its body, which must be text/html."""
    try:
        with urlopen(raw_url) as response:
            body = response.read()
            headers = response.headers
    except HTTPError as exc:
        error_body = exc.read().decode("utf-8", errors="replace")
        raise FetchError(
            f"bad status code returned from provided URL: {exc.code}\n{error_body}"
        ) from exc
    except (URLError, OSError, ValueError) as exc:
        raise FetchError(f"error making GET request to provided URL: {exc}") from exc

    if "text/html" not in (headers.get("Content-Type") or ""):
        raise FetchError(
            f"response is not in text/html content-type: {dict(headers.items())}"
        )
    return body.decode("utf-8", errors="replace")