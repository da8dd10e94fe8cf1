"""URL parsing helpers: well-formedness check and query tokenising."""

from __future__ import annotations

import re
from urllib.parse import SplitResult, unquote, urlsplit

from cleanurl.models import QueryItem

# urlsplit() silently strips tabs/newlines and leading C0 controls/space, and
# RFC 3986 allows none of them (nor a literal space) anywhere in a URI.
_DISALLOWED = re.compile(r"[\x00-\x20\x7f]")


def split_url(url: str) -> SplitResult | None:
    """Parse *url* with the generic URL syntax.

    Args:
        url: Raw URL string.

    Returns:
        The parsed parts, or ``None`` if *url* is not a well-formed URL.
    """
    if _DISALLOWED.search(url):
        return None
    try:
        parts = urlsplit(url)
        # Raises ValueError for a non-numeric or out-of-range port.
        parts.port  # noqa: B018
    except ValueError:
        return None
    return parts


def split_query(query: str, *, decode_names: bool) -> list[QueryItem]:
    """Split a raw query string into :class:`QueryItem` tokens.

    Tokens are split on ``&`` and each name ends at the first ``=``. Values
    are never decoded. Names are percent-decoded only if *decode_names* is
    set; ``+`` is left alone either way.

    Args:
        query:        Query string without the leading ``?``.
        decode_names: Whether to percent-decode names before they are compared.

    Returns:
        One item per token, in input order.
    """
    items: list[QueryItem] = []
    for token in query.split("&"):
        name, sep, value = token.partition("=")
        if decode_names:
            name = unquote(name)
        items.append(QueryItem(name=name, value=value if sep else None, raw=token))
    return items


def join_query(items: list[QueryItem]) -> str:
    """Rejoin *items* into a query string using their original text."""
    return "&".join(item.raw for item in items)
