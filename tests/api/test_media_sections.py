"""Integration tests for /api/admin/media-sections and their embedded features."""

from __future__ import annotations

from siteadmin.models.media_section import MediaSection, MediaSectionFeature
from tests.conftest import count_rows, create_media_section, data_of

URL = "/api/admin/media-sections"


def _features(data):
    return [(f["label"], f["sort_order"]) for f in data["features"]]


class TestCreateMediaSection:
    async def test_features_numbered_by_position(self, client, db):
        resp = await client.post(
            URL,
            json={
                "headline": "Built for teams",
                "features": [
                    {"label": "Fast", "sort_order": 9},
                    {"label": "Secure"},
                    {"label": "Simple", "is_visible": False},
                ],
            },
        )
        assert resp.status_code == 201
        data = data_of(resp)
        assert _features(data) == [("Fast", 0), ("Secure", 1), ("Simple", 2)]
        assert data["features"][2]["is_visible"] is False

    async def test_token_defaults(self, client, db):
        data = data_of(await client.post(URL, json={"headline": "Built for teams"}))
        assert data["badge_color"] == "#5243E9"
        assert data["background_color"] == "#FFFFFF"
        assert data["text_color"] == "#1F2937"

    async def test_cta_requires_text_and_url(self, client, db):
        resp = await client.post(URL, json={"headline": "Built for teams", "show_cta_button": True})
        assert resp.status_code == 400
        assert "cta_text and cta_url are required" in resp.json()["message"]
        assert await count_rows(db, MediaSection) == 0

    async def test_invalid_feature_reported_by_path(self, client, db):
        resp = await client.post(
            URL, json={"headline": "Built for teams", "features": [{"label": "Ok"}, {"label": ""}]}
        )
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "features.1.label"


class TestUpdateMediaSection:
    async def test_features_replaced_wholesale(self, client, db):
        section = await create_media_section(db, feature_labels=("Fast", "Secure", "Simple"))
        old_ids = [f.id for f in section.features]

        resp = await client.put(
            URL,
            json={
                "id": section.id,
                "features": [
                    {"id": old_ids[2], "label": "Simple"},
                    {"id": old_ids[0], "label": "Fast"},
                ],
            },
        )
        assert resp.status_code == 200
        data = data_of(resp)
        assert _features(data) == [("Simple", 0), ("Fast", 1)]
        assert await count_rows(db, MediaSectionFeature) == 2

    async def test_omitted_features_left_alone(self, client, db):
        section = await create_media_section(db, feature_labels=("Fast", "Secure"))
        data = data_of(await client.put(URL, json={"id": section.id, "headline": "New headline"}))
        assert data["headline"] == "New headline"
        assert _features(data) == [("Fast", 0), ("Secure", 1)]

    async def test_empty_list_clears_features(self, client, db):
        section = await create_media_section(db, feature_labels=("Fast",))
        data = data_of(await client.put(URL, json={"id": section.id, "features": []}))
        assert data["features"] == []
        assert await count_rows(db, MediaSectionFeature) == 0

    async def test_enabling_cta_requires_text_and_url(self, client, db):
        section = await create_media_section(db)
        resp = await client.put(URL, json={"id": section.id, "show_cta_button": True})
        assert resp.status_code == 400
        assert {e["field"] for e in resp.json()["errors"]} == {"cta_text", "cta_url"}
        data = data_of(await client.get(f"{URL}/{section.id}"))
        assert data["show_cta_button"] is False

    async def test_cta_fields_merge_with_stored_values(self, client, db):
        section = await create_media_section(db)
        await client.put(URL, json={"id": section.id, "cta_text": "Talk to us"})
        resp = await client.put(URL, json={"id": section.id, "show_cta_button": True, "cta_url": "/contact"})
        assert resp.status_code == 200
        data = data_of(resp)
        assert (data["show_cta_button"], data["cta_text"], data["cta_url"]) == (True, "Talk to us", "/contact")

        resp = await client.put(URL, json={"id": section.id, "cta_url": None})
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "cta_url"


class TestDeleteMediaSection:
    async def test_delete_cascades_to_features(self, client, db):
        section = await create_media_section(db)
        resp = await client.delete(URL, params={"id": section.id})
        assert resp.status_code == 200
        assert await count_rows(db, MediaSection) == 0
        assert await count_rows(db, MediaSectionFeature) == 0
