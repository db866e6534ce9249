"""Helpers for putting user text on the request line."""
from __future__ import annotations

from urllib.parse import quote

# Characters left as-is; everything else is UTF-8 encoded and percent-escaped.
UNRESERVED_MARKS = "-_.!~*'()"


def encode_query(text: str) -> str:
    """Percent-encode ``text`` so it can be used as a single query value."""
    return quote(text, safe=UNRESERVED_MARKS)


def build_search_url(base_url: str, text: str, param: str = "q") -> str:
    """Append the encoded query to ``base_url`` as ``param``."""
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{encode_query(param)}={encode_query(text)}"
