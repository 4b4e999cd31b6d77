"""List/form controller for one admin resource.

Holds the state an admin screen renders from: the loaded ``items``, the
form ``draft``, the form ``mode`` and the last ``error``. Drafts are checked
against the resource's pydantic schema before any request is made; a failed
submit keeps the form open with the draft intact.
"""

from __future__ import annotations

import copy
import inspect
import logging
from enum import Enum
from typing import Any, Awaitable, Callable

from pydantic import BaseModel

from siteadmin.client.api_client import AdminApiClient
from siteadmin.core.errors import AdminError, ConflictError, FieldProblem, NotFoundError, ValidationError
from siteadmin.core.validation import validate

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong. Please try again."

# Errors whose message is shown to the user as-is
_USER_FACING = (ValidationError, NotFoundError, ConflictError)


class FormMode(str, Enum):
    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"


class ResourceController:
    def __init__(
        self,
        api: AdminApiClient,
        resource: str,
        *,
        create_schema: type[BaseModel],
        update_schema: type[BaseModel],
        scope: dict[str, Any] | None = None,
    ):
        self.api = api
        self.resource = resource
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.scope = scope

        self.items: list[dict] = []
        self.draft: dict[str, Any] | None = None
        self.mode = FormMode.CLOSED
        self.editing_id: int | None = None
        self.error: str | None = None
        self.problems: list[FieldProblem] = []
        self.loading = False

    @property
    def is_open(self) -> bool:
        return self.mode is not FormMode.CLOSED

    def _fail(self, exc: AdminError) -> None:
        self.problems = list(getattr(exc, "problems", []))
        if isinstance(exc, _USER_FACING):
            self.error = exc.message
            return
        logger.error("%s request failed: %s", self.resource, exc.message)
        self.error = GENERIC_ERROR

    async def load(self, scope: dict[str, Any] | None = None) -> list[dict]:
        if scope is not None:
            self.scope = scope
        self.loading = True
        try:
            self.items = await self.api.list(self.resource, self.scope)
            self.error = None
        except AdminError as exc:
            self._fail(exc)
        finally:
            self.loading = False
        return self.items

    def begin_create(self, defaults: dict[str, Any] | None = None) -> None:
        self.mode = FormMode.CREATE
        self.editing_id = None
        self.draft = dict(defaults or {})
        if self.scope:
            for key, value in self.scope.items():
                self.draft.setdefault(key, value)
        self.error = None
        self.problems = []

    def begin_edit(self, item: dict[str, Any]) -> None:
        self.mode = FormMode.EDIT
        self.editing_id = item["id"]
        self.draft = copy.deepcopy(item)
        self.error = None
        self.problems = []

    def cancel(self) -> None:
        self.mode = FormMode.CLOSED
        self.editing_id = None
        self.draft = None
        self.error = None
        self.problems = []

    async def submit(self, draft: dict[str, Any] | None = None) -> bool:
        """Create or update from the draft. Returns True when saved."""
        if draft is not None:
            self.draft = draft
        data = dict(self.draft or {})
        editing = self.mode is FormMode.EDIT and self.editing_id is not None
        if editing:
            data["id"] = self.editing_id
        else:
            data.pop("id", None)

        checked = validate(self.update_schema if editing else self.create_schema, data)
        if not checked.ok:
            self._fail(ValidationError(checked.problems))
            return False
        payload = checked.record.model_dump(mode="json", exclude_unset=True)

        self.loading = True
        try:
            if editing:
                await self.api.update(self.resource, payload)
            else:
                await self.api.create(self.resource, payload)
        except AdminError as exc:
            self._fail(exc)
            return False
        finally:
            self.loading = False

        self.cancel()
        await self.load()
        return True

    async def remove(self, record_id: int, confirm: Callable[[], bool | Awaitable[bool]]) -> bool:
        """Delete after ``confirm()`` agrees. Returns True when deleted."""
        answer = confirm()
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            return False
        try:
            await self.api.delete(self.resource, record_id)
        except AdminError as exc:
            self._fail(exc)
            return False
        if self.editing_id == record_id:
            self.cancel()
        await self.load()
        return True
