"""URL and query string helpers."""

from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import parse_qs, parse_qsl, urlencode, urlsplit, urlunsplit

QueryParams = Mapping[str, Any] | Sequence[tuple[str, Any]]


def concat_url(base_url: str, path: str) -> str:
    """Join a base URL and a path with exactly one slash between them."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def build_query(params: QueryParams) -> str:
    """Encode a mapping or ordered pairs as a query string.

    ``None`` values are skipped. Pairs keep their order and repeated keys.
    """
    items = params.items() if isinstance(params, Mapping) else params
    return urlencode([(k, v) for k, v in items if v is not None])


def build_url(url: str, params: QueryParams) -> str:
    """Append query parameters to a URL."""
    query = build_query(params)
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def parse_query(query: str) -> dict[str, str]:
    """Parse a query string into a dict holding the first value of each key.

    A leading ``?`` is ignored, so ``urlsplit(url).query`` and a raw
    ``location.search`` style string are both accepted.
    """
    parsed = parse_qs(query.lstrip("?"), keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items()}


def parse_query_pairs(query: str) -> list[tuple[str, str]]:
    """Parse a query string into ordered pairs, keeping repeated keys."""
    return parse_qsl(query.lstrip("?"), keep_blank_values=True)


def get_clean_url(url: str) -> str:
    """Strip the query string and fragment from a URL."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
