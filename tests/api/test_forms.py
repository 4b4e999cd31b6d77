"""Integration tests for /api/admin/forms: embedded, ordered form fields."""

from __future__ import annotations

from siteadmin.models.form import Form, FormField
from tests.conftest import count_rows, create_form, data_of

URL = "/api/admin/forms"


def _field(name, field_type="text", **kw):
    return {"field_type": field_type, "field_name": name, "label": name.title(), **kw}


def _names(form):
    return [(f["field_name"], f["sort_order"]) for f in form["fields"]]


class TestCreateForm:
    async def test_fields_numbered_by_body_order(self, client, db):
        body = {
            "name": "Contact",
            "fields": [_field("name", sort_order=9), _field("email", "email", sort_order=3)],
        }
        resp = await client.post(URL, json=body)
        assert resp.status_code == 201
        form = data_of(resp)
        assert _names(form) == [("name", 0), ("email", 1)]
        assert form["cta_text"] == "Send Message"

    async def test_select_field_keeps_options(self, client, db):
        body = {"name": "Quote", "fields": [_field("plan", "select", field_options=["Basic", "Pro"])]}
        form = data_of(await client.post(URL, json=body))
        assert form["fields"][0]["field_options"] == ["Basic", "Pro"]

    async def test_duplicate_field_names_write_nothing(self, client, db):
        body = {"name": "Contact", "fields": [_field("email"), _field("email")]}
        resp = await client.post(URL, json=body)
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "fields"
        assert await count_rows(db, Form) == 0
        assert await count_rows(db, FormField) == 0

    async def test_nested_error_path(self, client, db):
        body = {"name": "Contact", "fields": [_field("name"), _field("size", field_width="huge")]}
        resp = await client.post(URL, json=body)
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "fields.1.field_width"


class TestUpdateForm:
    async def test_fields_replaced_and_renumbered(self, client, db):
        form = await create_form(db, field_names=("name", "email", "message"))
        body = {
            "id": form.id,
            "fields": [_field("message", "textarea"), _field("name"), _field("phone", "phone")],
        }
        data = data_of(await client.put(URL, json=body))
        assert _names(data) == [("message", 0), ("name", 1), ("phone", 2)]
        assert await count_rows(db, FormField) == 3

    async def test_move_field_keeps_other_settings(self, client, db):
        form = data_of(
            await client.post(
                URL,
                json={
                    "name": "Contact",
                    "fields": [_field("name", is_required=True), _field("email", "email")],
                },
            )
        )
        moved = list(reversed(form["fields"]))
        data = data_of(await client.put(URL, json={"id": form["id"], "fields": moved}))
        assert _names(data) == [("email", 0), ("name", 1)]
        assert data["fields"][1]["is_required"] is True

    async def test_omitted_fields_untouched(self, client, db):
        form = await create_form(db, field_names=("name", "email"))
        data = data_of(await client.put(URL, json={"id": form.id, "title": "Get in touch"}))
        assert data["title"] == "Get in touch"
        assert _names(data) == [("name", 0), ("email", 1)]

    async def test_empty_list_removes_all_fields(self, client, db):
        form = await create_form(db, field_names=("name",))
        data = data_of(await client.put(URL, json={"id": form.id, "fields": []}))
        assert data["fields"] == []
        assert await count_rows(db, FormField) == 0

    async def test_toggle_field_visibility(self, client, db):
        form = data_of(await client.post(URL, json={"name": "Contact", "fields": [_field("name")]}))
        fields = [{**form["fields"][0], "is_visible": False}]
        data = data_of(await client.put(URL, json={"id": form["id"], "fields": fields}))
        assert data["fields"][0]["is_visible"] is False
        assert data["fields"][0]["sort_order"] == 0

    async def test_unknown_form(self, client, db):
        resp = await client.put(URL, json={"id": 42, "fields": []})
        assert resp.status_code == 404


class TestDeleteForm:
    async def test_delete_cascades_fields(self, client, db):
        form = await create_form(db)
        resp = await client.delete(URL, params={"id": form.id})
        assert resp.status_code == 200
        assert await count_rows(db, Form) == 0
        assert await count_rows(db, FormField) == 0
