"""Unit tests for siteadmin.middleware.prometheus: request instrumentation.

These tests exercise the path normalisation helper and the middleware itself
using a minimal ASGI app. No database required.
"""

from __future__ import annotations

import pytest
from prometheus_client import REGISTRY
from starlette.applications import Starlette
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from siteadmin.middleware.prometheus import PrometheusMiddleware, _normalise_path

# ---------------------------------------------------------------------------
# Path normalisation
# ---------------------------------------------------------------------------


class TestNormalisePath:
    def test_numeric_id_collapsed(self):
        assert _normalise_path("/api/admin/forms/42") == "/api/admin/forms/{id}"

    def test_no_id_unchanged(self):
        assert _normalise_path("/api/admin/faq-categories") == "/api/admin/faq-categories"

    def test_root_path(self):
        assert _normalise_path("/") == "/"

    def test_trailing_slash_stripped(self):
        assert _normalise_path("/api/admin/forms/") == "/api/admin/forms"

    def test_reorder_segment_kept(self):
        assert _normalise_path("/api/admin/faqs/reorder") == "/api/admin/faqs/reorder"

    def test_mixed_alnum_not_collapsed(self):
        assert _normalise_path("/api/admin/forms/v2") == "/api/admin/forms/v2"


# ---------------------------------------------------------------------------
# Middleware integration
# ---------------------------------------------------------------------------


def _homepage(request):
    return PlainTextResponse("ok")


def _erroring(request):
    raise ValueError("boom")


@pytest.fixture()
def app():
    application = Starlette(
        routes=[
            Route("/api/admin/forms", _homepage),
            Route("/api/admin/forms/{form_id}", _homepage),
            Route("/api/health", _homepage),
            Route("/metrics", _homepage),
            Route("/api/admin/error", _erroring),
        ],
    )
    application.add_middleware(PrometheusMiddleware)
    return application


@pytest.fixture()
def client(app):
    return TestClient(app, raise_server_exceptions=False)


def _count(endpoint, status, method="GET"):
    value = REGISTRY.get_sample_value(
        "http_requests_total", {"method": method, "endpoint": endpoint, "status": status}
    )
    return value or 0.0


class TestPrometheusMiddleware:
    def test_normal_request_returns_200(self, client):
        resp = client.get("/api/admin/forms")
        assert resp.status_code == 200

    def test_request_counted(self, client):
        before = _count("/api/admin/forms", "200")
        client.get("/api/admin/forms")
        assert _count("/api/admin/forms", "200") == before + 1

    def test_ids_share_one_series(self, client):
        before = _count("/api/admin/forms/{id}", "200")
        client.get("/api/admin/forms/1")
        client.get("/api/admin/forms/2")
        assert _count("/api/admin/forms/{id}", "200") == before + 2

    def test_health_skipped(self, client):
        """Health endpoint should not be instrumented (in _SKIP_PATHS)."""
        before = _count("/api/health", "200")
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert _count("/api/health", "200") == before

    def test_metrics_skipped(self, client):
        resp = client.get("/metrics")
        assert resp.status_code == 200

    def test_error_request_records_500(self, client):
        """Even if the handler raises, metrics should still be recorded."""
        before = _count("/api/admin/error", "500")
        resp = client.get("/api/admin/error")
        assert resp.status_code == 500
        assert _count("/api/admin/error", "500") == before + 1
