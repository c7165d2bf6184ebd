"""
URL helpers for validating targets and naming output files.
"""

from __future__ import annotations

import re
from urllib import parse

from mediascope.utils import errors


def validate_url(url: str) -> str:
    """Return *url* unchanged if it is an absolute http(s) URL.

    Raises:
        InvalidUrlError: When the scheme or host is missing.
    """
    try:
        parsed = parse.urlparse(url)
    except ValueError as exc:
        raise errors.InvalidUrlError(f"Invalid URL: {url!r} ({exc})") from exc
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise errors.InvalidUrlError(f"Invalid URL: {url!r} (expected an absolute http(s) URL)")
    return url


def extract_domain(url: str) -> str:
    """Extract the hostname from a URL string."""
    try:
        parsed = parse.urlparse(url)
        return parsed.hostname or "unknown"
    except ValueError:
        return "unknown"


def slugify_host(url: str) -> str:
    """Hostname with every non-alphanumeric character replaced by ``-``.

    ``https://www.example.co.uk/x`` becomes ``www-example-co-uk``.
    """
    return re.sub(r"[^a-z0-9]", "-", extract_domain(url), flags=re.IGNORECASE)
