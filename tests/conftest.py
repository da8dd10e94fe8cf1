"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import pytest

from cleanurl.models import RemovalRequest
from cleanurl.parameters import all_parameters


# ---------------------------------------------------------------------------
# Removal set fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def tracking() -> frozenset[str]:
    """The full tracking parameter database."""
    return all_parameters()


@pytest.fixture
def utm_only() -> RemovalRequest:
    """A minimal removal request for algorithm tests."""
    return RemovalRequest.only(["utm_source"])


# ---------------------------------------------------------------------------
# URL fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mixed_url() -> str:
    """Shop URL mixing functional and tracking parameters."""
    return (
        "https://shop.example.com/product/widget-pro"
        "?id=12345&color=blue&utm_source=google&gclid=abc123&fbclid=def456"
    )


@pytest.fixture
def sample_urls() -> list[str]:
    """Small batch of URLs, one tracking parameter each."""
    return [
        "https://example.com?utm_source=test&id=1",
        "https://example.com?fbclid=123&id=2",
        "https://example.com?mc_cid=456&id=3",
    ]
