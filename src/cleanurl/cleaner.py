"""Remove tracking query parameters from URLs.

One filtering primitive (:func:`filter_query_items`) is shared by two
adapters:

* the structural path checks the URL with :func:`urllib.parse.urlsplit`,
  filters its query and splices it back into the original string, so
  scheme, authority, path and fragment come back byte for byte;
* the textual path splits the raw string at the first ``?`` and on ``&``,
  and is used for strings that do not parse as a well-formed URL.

Cleaning never raises for a string or a ``urllib.parse`` result.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from typing import TypeVar, Union
from urllib.parse import ParseResult, SplitResult

from cleanurl.models import QueryItem, RemovalRequest, TrackingCategory
from cleanurl.utils.logging import get_logger
from cleanurl.utils.url_utils import join_query, split_query, split_url

logger = get_logger(__name__)

URLType = TypeVar("URLType", str, SplitResult, ParseResult)
Removal = Union[RemovalRequest, Iterable[str]]


def _removal_names(removing: Removal) -> frozenset[str]:
    if isinstance(removing, RemovalRequest):
        return removing.names
    if isinstance(removing, str):
        return frozenset((removing.lower(),))
    return frozenset(name.lower() for name in removing)


# ---------------------------------------------------------------------------
# Core primitive
# ---------------------------------------------------------------------------


def filter_query_items(items: Iterable[QueryItem], names: frozenset[str]) -> list[QueryItem]:
    """Drop every item whose name, lowercased, is in *names*.

    Args:
        items: Query items in URL order.
        names: Lowercased parameter names to remove.

    Returns:
        The surviving items, in their original order.
    """
    return [item for item in items if item.name.lower() not in names]


def _clean_query(query: str, names: frozenset[str], *, decode_names: bool) -> str:
    return join_query(filter_query_items(split_query(query, decode_names=decode_names), names))


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------


def _clean_text(url: str, names: frozenset[str]) -> str:
    base, sep, query = url.partition("?")
    if not sep:
        return url
    cleaned = _clean_query(query, names, decode_names=False)
    return f"{base}?{cleaned}" if cleaned else base


def _clean_parts(parts: SplitResult | ParseResult, names: frozenset[str]) -> SplitResult | ParseResult:
    if not parts.query:
        return parts
    return parts._replace(query=_clean_query(parts.query, names, decode_names=True))


def _clean_string(url: str, names: frozenset[str]) -> str:
    if "?" not in url:
        return url
    if split_url(url) is None:
        logger.debug("cleaner.fallback", url=url)
        return _clean_text(url, names)
    # Same query boundaries as urlsplit(): the first "?" before any "#".
    query_end = url.find("#")
    if query_end < 0:
        query_end = len(url)
    query_start = url.find("?", 0, query_end)
    if query_start < 0:
        return url
    query = url[query_start + 1 : query_end]
    cleaned = _clean_query(query, names, decode_names=True) if query else ""
    if query and cleaned == query:
        return url
    return url[:query_start] + (f"?{cleaned}" if cleaned else "") + url[query_end:]


def _clean(url: URLType, names: frozenset[str]) -> URLType:
    if isinstance(url, str):
        return _clean_string(url, names)
    if isinstance(url, (SplitResult, ParseResult)):
        return _clean_parts(url, names)
    raise TypeError(f"cannot clean a {type(url).__name__}; expected str, SplitResult or ParseResult")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def clean(url: URLType, removing: Removal) -> URLType:
    """Return a copy of *url* without the query parameters named in *removing*.

    Names are matched case-insensitively; values and every other part of the
    URL are left untouched. If no parameters survive, the ``?`` is dropped.

    Args:
        url:      A URL string, or a :class:`~urllib.parse.SplitResult` /
                  :class:`~urllib.parse.ParseResult`.
        removing: A :class:`RemovalRequest` or any collection of names.

    Returns:
        A value of the same type as *url*.

    Raises:
        TypeError: If *url* is of any other type.
    """
    return _clean(url, _removal_names(removing))


def clean_text(url: str, removing: Removal) -> str:
    """Remove parameters from *url* by plain string splitting.

    Parameter names are compared verbatim (case-insensitively) and are not
    percent-decoded, so an encoded name such as ``utm%5Fsource`` is kept.
    Everything after the first ``?`` is treated as the query, fragment
    included.

    Args:
        url:      Any string.
        removing: Names to remove.

    Returns:
        The cleaned string; never raises.
    """
    return _clean_text(url, _removal_names(removing))


def clean_many(urls: Iterable[URLType], removing: Removal) -> list[URLType]:
    """Clean each of *urls* independently with the same removal set."""
    names = _removal_names(removing)
    return [_clean(url, names) for url in urls]


# ---------------------------------------------------------------------------
# Convenience wrappers
# ---------------------------------------------------------------------------


@lru_cache(maxsize=32)
def _category_request(categories: frozenset[TrackingCategory]) -> RemovalRequest:
    return RemovalRequest.for_categories(categories)


def without_tracking(
    url: URLType,
    categories: Iterable[TrackingCategory | str] | None = None,
    extra: Iterable[str] = (),
) -> URLType:
    """Remove known tracking parameters from *url*.

    Args:
        url:        URL to clean.
        categories: Restrict removal to these categories; all when ``None``.
        extra:      Additional names to remove on top of the tracking set.

    Returns:
        A value of the same type as *url*.
    """
    if categories is None:
        wanted = TrackingCategory.all()
    else:
        wanted = frozenset(TrackingCategory(c) for c in categories)
    request = _category_request(wanted)
    if extra:
        request = request | RemovalRequest.only(extra)
    return clean(url, request)


def without_analytics(url: URLType) -> URLType:
    return without_tracking(url, [TrackingCategory.ANALYTICS])


def without_social(url: URLType) -> URLType:
    return without_tracking(url, [TrackingCategory.SOCIAL])


def without_email(url: URLType) -> URLType:
    return without_tracking(url, [TrackingCategory.EMAIL])


def without_ecommerce(url: URLType) -> URLType:
    return without_tracking(url, [TrackingCategory.ECOMMERCE])


def without_other(url: URLType) -> URLType:
    return without_tracking(url, [TrackingCategory.OTHER])


def without_params(url: URLType, names: Iterable[str]) -> URLType:
    """Remove only *names* from *url*, leaving tracking parameters alone."""
    return clean(url, RemovalRequest.only(names))
