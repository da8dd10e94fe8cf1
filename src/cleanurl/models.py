"""Pydantic v2 data models and enums for URL cleaning."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, field_validator


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class TrackingCategory(StrEnum):
    """Groupings of tracking parameters that can be removed selectively."""

    ANALYTICS = "analytics"
    """Google Analytics / Ads, search engines, Matomo (utm_*, gclid, ...)."""

    SOCIAL = "social"
    """Social platform click and share tracking (fbclid, ttclid, ...)."""

    EMAIL = "email"
    """Email marketing and automation (mc_cid, _hsenc, ...)."""

    ECOMMERCE = "ecommerce"
    """Shops and affiliate networks (ref, tag, affiliate_id, ...)."""

    OTHER = "other"
    """Everything else: news sites, video platforms, generic trackers."""

    @classmethod
    def all(cls) -> frozenset[TrackingCategory]:
        """Return every category."""
        return frozenset(cls)


# ---------------------------------------------------------------------------
# Query items
# ---------------------------------------------------------------------------


class QueryItem(NamedTuple):
    """One ``name[=value]`` token of a query string.

    ``value`` is ``None`` for a bare flag (no ``=``). ``raw`` is the token
    exactly as it appeared, and is what gets written back out.
    """

    name: str
    value: Optional[str]
    raw: str


# ---------------------------------------------------------------------------
# Removal request
# ---------------------------------------------------------------------------


class RemovalRequest(BaseModel):
    """The set of parameter names a single cleaning call will strip.

    Names are lowercased on construction so membership checks only need to
    lowercase the candidate.
    """

    model_config = ConfigDict(frozen=True)

    names: frozenset[str] = frozenset()

    @field_validator("names", mode="before")
    @classmethod
    def lowercase_names(cls, value: Iterable[str]) -> frozenset[str]:
        if isinstance(value, str):
            raise ValueError("names must be a collection of strings, not a single string")
        return frozenset(str(name).lower() for name in value)

    @classmethod
    def tracking(cls, extra: Iterable[str] = ()) -> RemovalRequest:
        """Every known tracking parameter, plus *extra*."""
        from cleanurl.parameters import all_parameters

        return cls(names=all_parameters() | frozenset(_as_names(extra)))

    @classmethod
    def for_categories(
        cls, categories: Iterable[TrackingCategory | str], extra: Iterable[str] = ()
    ) -> RemovalRequest:
        """The parameters of *categories* only, plus *extra*."""
        from cleanurl.parameters import parameters_for

        return cls(names=parameters_for(categories) | frozenset(_as_names(extra)))

    @classmethod
    def only(cls, names: Iterable[str]) -> RemovalRequest:
        """Exactly *names*; the tracking database is not consulted."""
        return cls(names=frozenset(_as_names(names)))

    def matches(self, name: str) -> bool:
        """Return True if *name* should be removed (case-insensitive)."""
        return name.lower() in self.names

    def __or__(self, other: RemovalRequest) -> RemovalRequest:
        if not isinstance(other, RemovalRequest):
            return NotImplemented
        return RemovalRequest(names=self.names | other.names)

    def __len__(self) -> int:
        return len(self.names)


def _as_names(names: Iterable[str]) -> Iterable[str]:
    # A lone string would otherwise be iterated character by character.
    if isinstance(names, str):
        return (names,)
    return names
