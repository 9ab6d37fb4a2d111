"""Learner Routes - HTTP surface over the learner store.

Invariants:
    - Literal paths (/passing, /search, /campus/...) are declared before /{learner_id}
    - A malformed or unknown id answers 400 with the plain-text body "Invalid ID"
    - Validation failures on writes answer 400 with the JSON error envelope
    - Routes hold no business logic; they parse, delegate to services, serialize

Design Decisions:
    - GET / is the demo endpoint: it only ever grades the seeded "Frodo" record
    - Unknown ids share the malformed-id response; LearnerNotFoundError stays a
      distinct type so services and logs can tell them apart
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import PlainTextResponse

from learner_api.core.domain_types import Campus, parse_learner_id
from learner_api.core.errors import LearnerNotFoundError, MalformedIdentifierError
from learner_api.core.repository_protocols import LearnerLike, LearnerStore
from learner_api.infrastructure.learner_store import get_learner_store
from learner_api.schemas.learner import LearnerResponse
from learner_api.services.demo_learner import grade_demo_learner
from learner_api.services.learner_queries import (
    create_learner, find_by_campus, find_by_name, find_passing, get_learner,
    peers_of,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["learners"])

INVALID_ID_BODY = "Invalid ID"


def _serialize(learners: list[LearnerLike]) -> list[LearnerResponse]:
    return [LearnerResponse.model_validate(learner) for learner in learners]


def _invalid_id() -> PlainTextResponse:
    return PlainTextResponse(
        INVALID_ID_BODY, status_code=status.HTTP_400_BAD_REQUEST,
    )


async def _find_by_route_id(
    store: LearnerStore, learner_id: str,
) -> LearnerLike | None:
    try:
        return await get_learner(store, parse_learner_id(learner_id))
    except (MalformedIdentifierError, LearnerNotFoundError) as e:
        logger.warning(
            f"Rejected learner id {learner_id!r}: {e.message}",
            extra={"error_code": e.code, "learner_id": e.context.learner_id},
        )
        return None


@router.get("/", response_model=LearnerResponse)
async def grade_demo(store: LearnerStore = Depends(get_learner_store)):
    """Set the demo learner's average and return the updated record."""
    learner = await grade_demo_learner(store)
    return LearnerResponse.model_validate(learner)


@router.post(
    "/", response_model=LearnerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create(
    payload: dict[str, Any] = Body(...),
    store: LearnerStore = Depends(get_learner_store),
):
    """Validate and insert a learner."""
    learner = await create_learner(store, payload)
    return LearnerResponse.model_validate(learner)


@router.get("/passing", response_model=list[LearnerResponse])
async def list_passing(store: LearnerStore = Depends(get_learner_store)):
    return _serialize(await find_passing(store))


@router.get("/search", response_model=list[LearnerResponse])
async def search_by_name(
    name: str = Query(
        "", max_length=200,
        description="Literal text the name must contain (case-insensitive, not a regex)",
    ),
    store: LearnerStore = Depends(get_learner_store),
):
    """Case-insensitive search for names containing `name` as literal text.

    `name` is not a pattern: regex syntax and SQL wildcards match themselves.
    """
    return _serialize(await find_by_name(store, name))


@router.get("/campus/{campus}", response_model=list[LearnerResponse])
async def list_by_campus(
    campus: Campus, store: LearnerStore = Depends(get_learner_store),
):
    return _serialize(await find_by_campus(store, campus))


@router.get("/{learner_id}/peers", response_model=list[LearnerResponse])
async def list_peers(
    learner_id: str, store: LearnerStore = Depends(get_learner_store),
):
    """Learners sharing campus and year with the given one, itself included."""
    learner = await _find_by_route_id(store, learner_id)
    if learner is None:
        return _invalid_id()
    return _serialize(await peers_of(store, learner))


@router.get("/{learner_id}", response_model=LearnerResponse)
async def get_by_id(
    learner_id: str, store: LearnerStore = Depends(get_learner_store),
):
    learner = await _find_by_route_id(store, learner_id)
    if learner is None:
        return _invalid_id()
    return LearnerResponse.model_validate(learner)
