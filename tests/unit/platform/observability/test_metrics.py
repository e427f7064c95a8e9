"""Unit tests for HTTP metrics helpers."""

import pytest
from fastapi.routing import APIRoute

from everfit_app.platform.observability.metrics import (
    BUCKETS,
    PATH_NOT_FOUND,
    HTTPLabels,
    get_path,
    http_status_nxx,
    metrics,
)


class TestHttpStatusNxx:
    """Tests for http_status_nxx."""

    @pytest.mark.parametrize(
        ("status", "expected"),
        [(101, "1XX"), (200, "2XX"), (301, "3XX"), (404, "4XX"), (405, "4XX"), (503, "5XX")],
    )
    def test_coarsens_status(self, status, expected):
        assert http_status_nxx(status) == expected


class TestHTTPLabels:
    """Tests for HTTPLabels NamedTuple."""

    def test_field_order(self):
        assert HTTPLabels._fields == ("method", "path", "http_status")

    def test_immutable(self):
        labels = HTTPLabels(method="GET", path="/", http_status="2XX")
        with pytest.raises(AttributeError):
            labels.method = "POST"  # type: ignore


class TestGetPath:
    """Tests for get_path."""

    @pytest.fixture
    def route(self) -> APIRoute:
        async def item(item_id: str):
            return {}

        return APIRoute("/items/{item_id}", item, methods=["GET"])

    def test_returns_route_template(self, route: APIRoute):
        scope = {"type": "http", "path": "/items/42", "route": route}

        assert get_path(scope) == "/items/{item_id}"

    def test_unmatched_path(self):
        scope = {"type": "http", "path": "/nope"}

        assert get_path(scope) == PATH_NOT_FOUND


def test_buckets_are_sorted_and_unbounded():
    assert list(BUCKETS) == sorted(BUCKETS)
    assert BUCKETS[-1] == float("inf")


def test_metrics_exposition():
    body, media_type = metrics()

    assert b"http_request_duration_seconds" in body
    assert media_type.startswith("text/plain")
