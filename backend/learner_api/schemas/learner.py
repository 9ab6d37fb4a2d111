"""Learner Schemas - Pydantic models with field-level validation for learner records.

Invariants:
    - MIN_YEAR <= LearnerCreate.year <= MAX_YEAR (the INTEGER column range)
    - LearnerCreate.avg is finite when present (NaN and infinities rejected)
    - LearnerCreate.campus is one of Campus; absent campus becomes Campus.REMOTE
    - name and enrolled are required; name cannot be empty
    - validate_learner() is the only path from untrusted input to a valid record

Design Decisions:
    - PydanticCustomError for year/campus: keeps the human-readable messages
      ("The year must be ...", "{value} is not a valid campus location.")
      instead of pydantic's generic wording
    - LearnerResponse reads ORM attributes directly (from_attributes), including
      the derived `passing` property
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from learner_api.core.domain_types import CAMPUS_VALUES, MAX_YEAR, MIN_YEAR, Campus
from learner_api.core.errors import LearnerValidationError


class LearnerCreate(BaseModel):
    """A learner record that satisfies every field constraint."""
    name: str = Field(min_length=1)
    enrolled: bool
    year: int
    avg: float | None = Field(default=None, allow_inf_nan=False)
    campus: Campus = Campus.REMOTE

    @field_validator("year")
    @classmethod
    def check_year_range(cls, v: int) -> int:
        if v < MIN_YEAR:
            raise PydanticCustomError(
                "year_too_early",
                "The year must be greater than or equal to {min_year}.",
                {"min_year": MIN_YEAR},
            )
        if v > MAX_YEAR:
            raise PydanticCustomError(
                "year_too_late",
                "The year must be less than or equal to {max_year}.",
                {"max_year": MAX_YEAR},
            )
        return v

    @field_validator("campus", mode="before")
    @classmethod
    def check_campus(cls, v: object) -> object:
        if v not in CAMPUS_VALUES:
            raise PydanticCustomError(
                "campus_invalid",
                "{value} is not a valid campus location.",
                {"value": str(v)},
            )
        return v


class LearnerResponse(BaseModel):
    """Learner as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    enrolled: bool
    year: int
    avg: float | None = None
    campus: str
    passing: bool


def validate_learner(record: object) -> LearnerCreate:
    """Validate a raw record, applying defaults.

    Raises LearnerValidationError listing every failed constraint.
    """
    try:
        return LearnerCreate.model_validate(record)
    except ValidationError as exc:
        raise LearnerValidationError(_field_errors(exc)) from exc


def _field_errors(exc: ValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]) or "record",
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
