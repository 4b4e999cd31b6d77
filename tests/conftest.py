"""Shared test fixtures for the site admin API.

Provides:
- A fresh test database per test (in-memory SQLite unless TEST_DATABASE_URL is set)
- FastAPI test app + HTTP client with the DB dependency overridden
- An AdminApiClient wired to the test app
- Factory helpers for CTAs, FAQs, forms, header configs and sections
"""

from __future__ import annotations

import os

# Set test environment BEFORE any app imports so Settings() picks them up.
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from siteadmin.models import Base

# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


def _test_db_url() -> str:
    return os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")


@pytest.fixture
async def db_engine():
    """Engine with an empty schema. In-memory SQLite shares one connection."""
    url = _test_db_url()
    if url.startswith("sqlite"):
        engine = create_async_engine(
            url, poolclass=StaticPool, connect_args={"check_same_thread": False}
        )
    else:
        engine = create_async_engine(url, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db(db_engine):
    session = AsyncSession(db_engine, expire_on_commit=False)
    yield session
    await session.close()


# ---------------------------------------------------------------------------
# FastAPI test app + HTTP client
# ---------------------------------------------------------------------------


@pytest.fixture
async def app(db):
    """Minimal FastAPI test app with ``get_db`` overridden to use the test session."""
    from fastapi import FastAPI

    from siteadmin.api.admin.router import admin_router
    from siteadmin.config import settings
    from siteadmin.core.errors import register_exception_handlers
    from siteadmin.database import get_db

    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(admin_router, prefix=settings.API_PREFIX)

    async def _override_get_db():
        yield db

    test_app.dependency_overrides[get_db] = _override_get_db
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """HTTP test client for the test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def api(app):
    """Admin API client talking to the test app in-process."""
    from siteadmin.client import AdminApiClient

    async with AdminApiClient("http://test", transport=ASGITransport(app=app)) as admin_api:
        yield admin_api


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def count_rows(db, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


def data_of(resp):
    """Unwrap the success envelope."""
    body = resp.json()
    assert body["success"] is True, body
    return body["data"]


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------


async def create_cta(db, *, text="Get Started", url="/signup", style="primary", target="_self", **kw):
    from siteadmin.models.cta import CTA

    cta = CTA(text=text, url=url, style=style, target=target, is_active=kw.pop("is_active", True), **kw)
    db.add(cta)
    await db.flush()
    return cta


async def create_faq_category(db, *, name="General", sort_order=0, **kw):
    from siteadmin.models.faq import FAQCategory

    category = FAQCategory(name=name, sort_order=sort_order, color=kw.pop("color", "#5243E9"), **kw)
    db.add(category)
    await db.flush()
    return category


async def create_faq(db, *, question="What is it?", answer="A site builder.", category_id=None, sort_order=0):
    from siteadmin.models.faq import FAQ

    faq = FAQ(question=question, answer=answer, category_id=category_id, sort_order=sort_order)
    db.add(faq)
    await db.flush()
    return faq


async def create_faq_section(db, *, name="Main FAQ", heading="Frequently asked questions"):
    from siteadmin.models.faq import FAQSection

    section = FAQSection(name=name, heading=heading)
    db.add(section)
    await db.flush()
    return section


async def create_form(db, *, name="Contact", field_names=("name", "email")):
    from siteadmin.models.form import Form, FormField

    form = Form(
        name=name,
        fields=[
            FormField(field_type="text", field_name=field_name, label=field_name.title(), sort_order=i)
            for i, field_name in enumerate(field_names)
        ],
    )
    db.add(form)
    await db.flush()
    return form


async def create_header_config(db, *, cta_ids=(), is_active=True):
    from siteadmin.models.header import HeaderConfig, HeaderCTA

    config = HeaderConfig(
        is_active=is_active,
        cta_buttons=[HeaderCTA(cta_id=cta_id, sort_order=i) for i, cta_id in enumerate(cta_ids)],
    )
    db.add(config)
    await db.flush()
    return config


async def create_media_section(db, *, headline="Built for teams", feature_labels=("Fast", "Secure")):
    from siteadmin.models.media_section import MediaSection, MediaSectionFeature

    section = MediaSection(
        headline=headline,
        badge_color="#5243E9",
        background_color="#FFFFFF",
        text_color="#1F2937",
        features=[
            MediaSectionFeature(label=label, sort_order=i) for i, label in enumerate(feature_labels)
        ],
    )
    db.add(section)
    await db.flush()
    return section
