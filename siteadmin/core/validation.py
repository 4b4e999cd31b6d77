from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import pydantic

from siteadmin.core.errors import FieldProblem, ValidationError, problems_from_pydantic

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


@dataclass
class Validated(Generic[ModelT]):
    """Outcome of validating a draft: either a record or field problems."""

    record: ModelT | None = None
    problems: list[FieldProblem] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.record is not None and not self.problems

    def unwrap(self) -> ModelT:
        if not self.ok:
            raise ValidationError(self.problems)
        return self.record


def validate(schema: type[ModelT], data: dict[str, Any]) -> Validated[ModelT]:
    """Validate a draft against a resource schema without side effects."""
    try:
        return Validated(record=schema.model_validate(data))
    except pydantic.ValidationError as exc:
        return Validated(problems=problems_from_pydantic(exc.errors()))
