"""Tests for categories and removal requests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cleanurl.models import QueryItem, RemovalRequest, TrackingCategory
from cleanurl.parameters import all_parameters, parameters_for


class TestTrackingCategory:
    def test_values(self) -> None:
        assert {c.value for c in TrackingCategory} == {
            "analytics",
            "social",
            "email",
            "ecommerce",
            "other",
        }

    def test_all(self) -> None:
        assert TrackingCategory.all() == frozenset(TrackingCategory)

    def test_is_str(self) -> None:
        assert TrackingCategory.SOCIAL == "social"


class TestQueryItem:
    def test_bare_flag_has_no_value(self) -> None:
        item = QueryItem(name="debug", value=None, raw="debug")
        assert item.value is None

    def test_fields(self) -> None:
        item = QueryItem("id", "1", "id=1")
        assert (item.name, item.value, item.raw) == ("id", "1", "id=1")


class TestRemovalRequest:
    """Tests for building removal sets."""

    def test_names_lowercased(self) -> None:
        request = RemovalRequest(names={"UTM_Source", "Debug"})
        assert request.names == {"utm_source", "debug"}

    def test_default_is_empty(self) -> None:
        assert len(RemovalRequest()) == 0

    def test_frozen(self) -> None:
        request = RemovalRequest.only(["a"])
        with pytest.raises(ValidationError):
            request.names = frozenset({"b"})  # type: ignore[misc]

    def test_rejects_bare_string(self) -> None:
        with pytest.raises(ValidationError):
            RemovalRequest(names="utm_source")  # type: ignore[arg-type]

    def test_matches_case_insensitive(self) -> None:
        request = RemovalRequest.only(["utm_source"])
        assert request.matches("UTM_SOURCE")
        assert request.matches("Utm_Source")
        assert not request.matches("id")

    def test_tracking(self) -> None:
        assert RemovalRequest.tracking().names == all_parameters()

    def test_tracking_with_extra(self) -> None:
        request = RemovalRequest.tracking(["Debug"])
        assert request.names == all_parameters() | {"debug"}

    def test_tracking_extra_single_string(self) -> None:
        """A lone string is one name, not a sequence of characters."""
        request = RemovalRequest.tracking("debug")
        assert "debug" in request.names
        assert "d" not in request.names

    def test_for_categories(self) -> None:
        request = RemovalRequest.for_categories([TrackingCategory.EMAIL])
        assert request.names == parameters_for([TrackingCategory.EMAIL])

    def test_for_categories_with_extra(self) -> None:
        request = RemovalRequest.for_categories(["social"], extra=["temp"])
        assert "fbclid" in request.names
        assert "temp" in request.names
        assert "utm_source" not in request.names

    def test_only_bypasses_database(self) -> None:
        request = RemovalRequest.only(["debug", "temp"])
        assert request.names == {"debug", "temp"}

    def test_union(self) -> None:
        combined = RemovalRequest.only(["a"]) | RemovalRequest.only(["B"])
        assert combined.names == {"a", "b"}

    def test_union_with_other_type(self) -> None:
        with pytest.raises(TypeError):
            RemovalRequest.only(["a"]) | {"b"}  # type: ignore[operator]
