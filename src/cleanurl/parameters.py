"""Known tracking parameters, grouped by category.

The table ships as ``data/tracking_params.yaml`` and is loaded once per
process. After loading nothing mutates it, so it is safe to share between
threads without locking.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

import yaml
from pydantic import BaseModel, field_validator

from cleanurl.models import TrackingCategory
from cleanurl.utils.logging import get_logger

logger = get_logger(__name__)

_DATA_PATH = Path(__file__).resolve().parent / "data" / "tracking_params.yaml"


class ParameterTable(BaseModel):
    """Validated contents of the tracking parameter data file."""

    version: str
    categories: dict[TrackingCategory, frozenset[str]]

    @field_validator("categories", mode="before")
    @classmethod
    def lowercase_names(cls, value: Mapping[str, Iterable[str]]) -> dict[str, frozenset[str]]:
        return {key: frozenset(str(name).lower() for name in names or ()) for key, names in value.items()}

    @field_validator("categories")
    @classmethod
    def require_all_categories(
        cls, value: dict[TrackingCategory, frozenset[str]]
    ) -> dict[TrackingCategory, frozenset[str]]:
        missing = TrackingCategory.all().difference(value)
        if missing:
            raise ValueError(f"missing categories: {sorted(missing)}")
        return value


@lru_cache(maxsize=1)
def load_table() -> ParameterTable:
    """Load and cache ``data/tracking_params.yaml``.

    Raises:
        pydantic.ValidationError: If the packaged file is malformed.
    """
    with _DATA_PATH.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    table = ParameterTable.model_validate(raw)
    logger.debug(
        "parameters.loaded",
        version=table.version,
        counts={str(c): len(names) for c, names in table.categories.items()},
    )
    return table


@lru_cache(maxsize=1)
def all_parameters() -> frozenset[str]:
    """Return every known tracking parameter name, lowercased."""
    return frozenset().union(*load_table().categories.values())


def parameters_for(categories: Iterable[TrackingCategory | str]) -> frozenset[str]:
    """Return the union of the parameter names in *categories*.

    Args:
        categories: Any subset of :class:`TrackingCategory`. Plain strings
            are accepted if they name a category.

    Returns:
        Lowercased names. Empty for an empty *categories*.

    Raises:
        ValueError: If a string does not name a category.
    """
    table = load_table().categories
    wanted = {TrackingCategory(c) for c in categories}
    if wanted == TrackingCategory.all():
        return all_parameters()
    return frozenset().union(*(table[c] for c in wanted))


def category_parameters() -> Mapping[TrackingCategory, frozenset[str]]:
    """Return a read-only view of the whole category table."""
    return MappingProxyType(load_table().categories)


def categories_of(name: str) -> frozenset[TrackingCategory]:
    """Return the categories that list *name* (case-insensitive)."""
    key = name.lower()
    return frozenset(c for c, names in load_table().categories.items() if key in names)


def is_tracking_parameter(name: str) -> bool:
    """Return True if *name* is a known tracking parameter (case-insensitive)."""
    return name.lower() in all_parameters()


def database_version() -> str:
    """Return the version string of the loaded parameter table."""
    return load_table().version
