"""Tests for siteadmin.client.api_client.

Error mapping runs against ``httpx.MockTransport``; the round trips run
against the in-process test app.
"""

from __future__ import annotations

import json

import httpx
import pytest

from siteadmin.client.api_client import AdminApiClient, error_from_response
from siteadmin.core.errors import (
    AdminError,
    ConflictError,
    NetworkError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from tests.conftest import create_faq, create_faq_category


def _mock_client(handler) -> AdminApiClient:
    return AdminApiClient("http://admin.test", transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# error_from_response
# ---------------------------------------------------------------------------


class TestErrorFromResponse:
    def test_validation_keeps_problems(self):
        err = error_from_response(
            400,
            {"message": "Validation failed", "errors": [{"field": "text", "message": "must not be empty"}]},
        )
        assert isinstance(err, ValidationError)
        assert err.message == "Validation failed"
        assert [(p.field, p.message) for p in err.problems] == [("text", "must not be empty")]

    def test_not_found_message_verbatim(self):
        err = error_from_response(404, {"message": "CTA 7 not found"})
        assert isinstance(err, NotFoundError)
        assert err.message == "CTA 7 not found"

    def test_conflict(self):
        assert isinstance(error_from_response(409, {"message": "Edited elsewhere"}), ConflictError)

    @pytest.mark.parametrize("status", [500, 502, 503])
    def test_server_errors_are_store_errors(self, status):
        err = error_from_response(status, {})
        assert isinstance(err, StoreError)
        assert err.message == f"HTTP {status}"

    def test_other_status_keeps_code(self):
        err = error_from_response(405, {"detail": "Method Not Allowed"})
        assert type(err) is AdminError
        assert err.status_code == 405


# ---------------------------------------------------------------------------
# Transport behaviour
# ---------------------------------------------------------------------------


class TestTransport:
    async def test_envelope_unwrapped(self):
        def handler(request):
            assert request.url.path == "/api/admin/cta-buttons/3"
            return httpx.Response(200, json={"success": True, "data": {"id": 3}, "message": None})

        async with _mock_client(handler) as api:
            assert await api.get("cta-buttons", 3) == {"id": 3}

    async def test_connect_error_is_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with _mock_client(handler) as api:
            with pytest.raises(NetworkError) as exc_info:
                await api.list("faqs")
        assert exc_info.value.message == "Unable to connect to server"

    async def test_timeout_is_network_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async with _mock_client(handler) as api:
            with pytest.raises(NetworkError):
                await api.create("faqs", {"question": "Q?", "answer": "A."})

    async def test_non_json_error_body(self):
        def handler(request):
            return httpx.Response(502, text="<html>Bad gateway</html>")

        async with _mock_client(handler) as api:
            with pytest.raises(StoreError):
                await api.list("faqs")

    async def test_null_scope_sent_as_literal(self):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json={"success": True, "data": []})

        async with _mock_client(handler) as api:
            await api.list("faqs", {"category_id": None})
        assert seen == {"category_id": "null"}

    async def test_reorder_body_carries_scope(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = request.read()
            return httpx.Response(200, json={"success": True, "data": []})

        async with _mock_client(handler) as api:
            await api.reorder("faqs", [3, 1], {"category_id": 2})
        assert seen["method"] == "PUT"
        assert seen["path"] == "/api/admin/faqs/reorder"
        assert json.loads(seen["body"]) == {"ids": [3, 1], "category_id": 2}


# ---------------------------------------------------------------------------
# Round trips against the API
# ---------------------------------------------------------------------------


class TestRoundTrip:
    async def test_crud_cycle(self, api, db):
        created = await api.create("cta-buttons", {"text": "Sign up", "url": "/signup"})
        updated = await api.update("cta-buttons", {"id": created["id"], "style": "ghost"})
        assert updated["style"] == "ghost"
        assert [c["id"] for c in await api.list("cta-buttons")] == [created["id"]]
        await api.delete("cta-buttons", created["id"])
        with pytest.raises(NotFoundError):
            await api.get("cta-buttons", created["id"])

    async def test_validation_error_surfaces_fields(self, api, db):
        with pytest.raises(ValidationError) as exc_info:
            await api.create("cta-buttons", {"text": "", "url": "/x"})
        assert [p.field for p in exc_info.value.problems] == ["text"]

    async def test_scoped_list_and_reorder(self, api, db):
        category = await create_faq_category(db)
        a = await create_faq(db, question="A?", category_id=category.id, sort_order=0)
        b = await create_faq(db, question="B?", category_id=category.id, sort_order=1)
        await create_faq(db, question="Loose?")

        scope = {"category_id": category.id}
        assert [f["id"] for f in await api.list("faqs", scope)] == [a.id, b.id]
        saved = await api.reorder("faqs", [b.id, a.id], scope)
        assert [(f["id"], f["sort_order"]) for f in saved] == [(b.id, 0), (a.id, 1)]
        assert [f["question"] for f in await api.list("faqs", {"category_id": None})] == ["Loose?"]
