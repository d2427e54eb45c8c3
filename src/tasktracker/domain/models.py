from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _null_as(zero: Any) -> BeforeValidator:
    # JSON null leaves the field at its zero value
    return BeforeValidator(lambda v: zero if v is None else v)


TaskId = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX), _null_as(0)]


class Task(BaseModel):
    """
    A tracked unit of work, used both as request body and response payload.

    Wire names are `ID`, `Title`, `Done`. Decoding is strict (no "true" -> True
    coercion); missing or null fields take their zero value and unknown fields
    are ignored. On POST the body ID is ignored and replaced by the store.
    """
    model_config = ConfigDict(strict=True, populate_by_name=True)

    id: TaskId = Field(default=0, alias="ID")
    title: Annotated[str, _null_as("")] = Field(default="", alias="Title")
    done: Annotated[bool, _null_as(False)] = Field(default=False, alias="Done")


class ErrorResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    error: str
    code: str
    details: dict = Field(default_factory=dict)
