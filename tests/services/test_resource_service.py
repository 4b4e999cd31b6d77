"""Service-level tests for ResourceService: outcome metrics, store errors, scope handling."""

from __future__ import annotations

import pytest
from prometheus_client import REGISTRY
from sqlalchemy.exc import OperationalError

from siteadmin.core.errors import NotFoundError, StoreError, ValidationError
from siteadmin.schemas.cta import CTAUpdate
from siteadmin.schemas.faq import FAQCreate
from siteadmin.services import resources
from siteadmin.services.resource_service import UNSCOPED
from tests.conftest import create_cta, create_faq, create_faq_category


def _outcomes(resource: str, operation: str, outcome: str) -> float:
    value = REGISTRY.get_sample_value(
        "resource_operations_total",
        {"resource": resource, "operation": operation, "outcome": outcome},
    )
    return value or 0.0


@pytest.fixture
def failing_commit(db, monkeypatch):
    async def _commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    def install():
        monkeypatch.setattr(db, "commit", _commit)

    return install


class TestOutcomeMetrics:
    async def test_success_counted(self, db):
        before = _outcomes("cta-buttons", "list", "success")
        await resources.cta_buttons.list(db)
        assert _outcomes("cta-buttons", "list", "success") == before + 1

    async def test_not_found_counted(self, db):
        before = _outcomes("cta-buttons", "get", "not_found")
        with pytest.raises(NotFoundError):
            await resources.cta_buttons.get(db, 404)
        assert _outcomes("cta-buttons", "get", "not_found") == before + 1

    async def test_validation_counted(self, db):
        before = _outcomes("faqs", "reorder", "validation_error")
        with pytest.raises(ValidationError):
            await resources.faqs.reorder(db, [1, 1], None)
        assert _outcomes("faqs", "reorder", "validation_error") == before + 1


class TestStoreErrors:
    async def test_commit_failure_rolls_back(self, db, failing_commit):
        cta = await create_cta(db, text="Original")
        await db.commit()
        cta_id = cta.id
        failing_commit()

        before = _outcomes("cta-buttons", "update", "store_error")
        with pytest.raises(StoreError) as exc_info:
            await resources.cta_buttons.update(db, cta_id, CTAUpdate(id=cta_id, text="Changed"))

        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value.__cause__, OperationalError)
        assert _outcomes("cta-buttons", "update", "store_error") == before + 1
        assert (await resources.cta_buttons.get(db, cta_id)).text == "Original"

    async def test_store_error_over_http(self, client, db, failing_commit):
        cta = await create_cta(db)
        await db.commit()
        failing_commit()

        resp = await client.put("/api/admin/cta-buttons", json={"id": cta.id, "text": "Changed"})
        assert resp.status_code == 500
        body = resp.json()
        assert body["success"] is False
        assert body["code"] == "STORE_ERROR"
        assert body["message"] == "Database error occurred"


class TestScopes:
    async def test_unscoped_list_returns_everything(self, db):
        category = await create_faq_category(db)
        await create_faq(db, question="Scoped?", category_id=category.id)
        await create_faq(db, question="Loose?")
        assert len(await resources.faqs.list(db, UNSCOPED)) == 2
        assert [f.question for f in await resources.faqs.list(db, None)] == ["Loose?"]
        assert [f.question for f in await resources.faqs.list(db, category.id)] == ["Scoped?"]

    async def test_create_appends_within_scope(self, db):
        category = await create_faq_category(db)
        await create_faq(db, category_id=category.id, sort_order=0)
        await create_faq(db, category_id=category.id, sort_order=1)
        await create_faq(db, sort_order=0)

        created = await resources.faqs.create(
            db, FAQCreate(question="Third?", answer="Yes.", category_id=category.id)
        )
        assert created.sort_order == 2

        loose = await resources.faqs.create(db, FAQCreate(question="Another?", answer="Yes."))
        assert loose.sort_order == 1

    async def test_reorder_requires_scope(self, db):
        with pytest.raises(ValidationError) as exc_info:
            await resources.faqs.reorder(db, [])
        assert exc_info.value.problems[0].field == "category_id"

    async def test_unordered_resource_cannot_reorder(self, db):
        with pytest.raises(ValidationError):
            await resources.cta_buttons.reorder(db, [])
