"""Client-side editors for ordered collections.

Every mutation renumbers the in-memory list first and then persists it in
one request. If the request fails the list is restored to its state before
the mutation and the error is re-raised.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from siteadmin.client.api_client import AdminApiClient
from siteadmin.core.errors import AdminError
from siteadmin.core.ordering import SORT_ATTR, OrderedCollection

logger = logging.getLogger(__name__)


class OrderedChildrenEditor:
    """Edits a child list embedded in a parent record (form fields, features, header CTAs).

    Each mutation PUTs the parent with the complete child list, which the
    API replaces wholesale.
    """

    def __init__(
        self,
        api: AdminApiClient,
        resource: str,
        parent: dict[str, Any],
        child_key: str,
        visibility_attr: str = "is_visible",
    ):
        self.api = api
        self.resource = resource
        self.child_key = child_key
        self.parent = copy.deepcopy(parent)
        self.children = OrderedCollection(self.parent.get(child_key) or [], visibility_attr=visibility_attr)

    @property
    def items(self) -> list[dict]:
        return self.children.items

    async def _persist(self, snapshot: list[dict]) -> dict:
        body = {"id": self.parent["id"], self.child_key: list(self.children)}
        try:
            saved = await self.api.update(self.resource, body)
        except AdminError:
            self.children.restore(snapshot)
            logger.warning("Rolled back %s change on %s %s", self.child_key, self.resource, self.parent["id"])
            raise
        self.parent = saved
        self.children = OrderedCollection(
            saved.get(self.child_key) or [], visibility_attr=self.children.visibility_attr
        )
        return saved

    async def move(self, from_index: int, to_index: int) -> dict:
        snapshot = self.children.snapshot()
        self.children.move(from_index, to_index)
        return await self._persist(snapshot)

    async def add(self, item: dict[str, Any], index: int | None = None) -> dict:
        snapshot = self.children.snapshot()
        self.children.add(dict(item), index)
        return await self._persist(snapshot)

    async def remove(self, index: int) -> dict:
        snapshot = self.children.snapshot()
        self.children.remove(index)
        return await self._persist(snapshot)

    async def toggle_visibility(self, index: int) -> dict:
        snapshot = self.children.snapshot()
        self.children.toggle_visibility(index)
        return await self._persist(snapshot)


class SiblingOrderEditor:
    """Orders top-level records of one scope (FAQs in a category, FAQ categories)."""

    def __init__(self, api: AdminApiClient, resource: str, scope: dict[str, Any] | None = None):
        self.api = api
        self.resource = resource
        self.scope = dict(scope or {})
        self.collection = OrderedCollection()

    @property
    def items(self) -> list[dict]:
        return self.collection.items

    async def load(self) -> list[dict]:
        self.collection = OrderedCollection(await self.api.list(self.resource, self.scope or None))
        return self.items

    async def _persist_order(self) -> list[dict]:
        ids = [item["id"] for item in self.collection]
        saved = await self.api.reorder(self.resource, ids, self.scope or None)
        self.collection = OrderedCollection(saved)
        return self.items

    async def move(self, from_index: int, to_index: int) -> list[dict]:
        snapshot = self.collection.snapshot()
        self.collection.move(from_index, to_index)
        try:
            return await self._persist_order()
        except AdminError:
            self.collection.restore(snapshot)
            raise

    async def add(self, data: dict[str, Any]) -> dict:
        """Create a record at the end of the collection."""
        body = {**data, **self.scope, SORT_ATTR: len(self.collection)}
        created = await self.api.create(self.resource, body)
        self.collection.add(created)
        await self._persist_order()
        return created

    async def remove(self, index: int) -> list[dict]:
        snapshot = self.collection.snapshot()
        item = self.collection.remove(index)
        try:
            await self.api.delete(self.resource, item["id"])
        except AdminError:
            self.collection.restore(snapshot)
            raise
        # The record is gone server-side; a failed renumber leaves the survivors as they are
        return await self._persist_order()
