"""Error taxonomy shared by the admin API handlers and the admin client.

Every handler failure is one of the classes below.  The API renders them
through :func:`register_exception_handlers` inside the standard envelope::

    {"success": false, "data": null, "message": "...", "code": "...",
     "errors": [{"field": "fields.0.label", "message": "..."}]}

``NetworkError`` only ever originates on the client side.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldProblem:
    field: str
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


class AdminError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        return {"success": False, "data": None, "message": self.message, "code": self.code}


class ValidationError(AdminError):
    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(self, problems: list[FieldProblem] | FieldProblem, message: str | None = None):
        if isinstance(problems, FieldProblem):
            problems = [problems]
        self.problems = list(problems)
        if message is None:
            message = "Validation failed: " + ", ".join(
                f"{p.field}: {p.message}" if p.field else p.message for p in self.problems
            )
        super().__init__(message)

    @classmethod
    def for_field(cls, field: str, message: str) -> ValidationError:
        return cls(FieldProblem(field, message))

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload["errors"] = [p.to_dict() for p in self.problems]
        return payload


class NotFoundError(AdminError):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str = "Resource", record_id: object | None = None, message: str | None = None):
        if message is None:
            message = f"{resource} not found"
            if record_id is not None:
                message = f"{resource} {record_id} not found"
        super().__init__(message)
        self.resource = resource
        self.record_id = record_id


class ConflictError(AdminError):
    """Reserved for concurrent-edit detection; no handler raises it yet."""

    status_code = 409
    code = "CONFLICT"


class StoreError(AdminError):
    status_code = 500
    code = "STORE_ERROR"

    def __init__(self, message: str = "Database error occurred"):
        super().__init__(message)


class NetworkError(AdminError):
    status_code = 0
    code = "NETWORK_ERROR"

    def __init__(self, message: str = "Unable to connect to server"):
        super().__init__(message)


def problems_from_pydantic(errors: list[dict], skip_prefixes: tuple[str, ...] = ()) -> list[FieldProblem]:
    """Flatten pydantic error dicts into dotted-path field problems."""
    problems = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        while loc and loc[0] in skip_prefixes:
            loc = loc[1:]
        message = err.get("msg", "Invalid value")
        # pydantic prefixes errors raised from validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        problems.append(FieldProblem(".".join(loc), message))
    return problems


async def _admin_error_handler(request: Request, exc: AdminError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(exc.to_payload(), status_code=exc.status_code)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError(problems_from_pydantic(exc.errors(), skip_prefixes=("body", "query")))
    return JSONResponse(error.to_payload(), status_code=error.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AdminError, _admin_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
