"""Learner Queries - canned reads and validated writes over any LearnerStore.

Invariants:
    - Every function takes the store explicitly; no module state
    - Reads never mutate; writes always go through validate_learner() first
    - peers_of() includes the learner itself
    - find_by_name() matches a case-insensitive literal substring, never a regex;
      LIKE wildcards in the pattern are escaped and match literally

Design Decisions:
    - Free functions over model classmethods: the ORM model stays a plain record
      and these helpers work against a fake store in tests
"""

import logging

from learner_api.core.domain_types import PASSING_AVERAGE, Campus, LearnerId
from learner_api.core.errors import LearnerNotFoundError
from learner_api.core.repository_protocols import LearnerLike, LearnerStore
from learner_api.models.learner import Learner
from learner_api.schemas.learner import validate_learner

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"


async def find_passing(store: LearnerStore) -> list[LearnerLike]:
    """All learners whose average is at least PASSING_AVERAGE."""
    return await store.find_many(Learner.avg >= PASSING_AVERAGE)


async def find_by_campus(
    store: LearnerStore, campus: Campus,
) -> list[LearnerLike]:
    campus_value = Campus(campus).value
    learners = await store.find_many(Learner.campus == campus_value)
    logger.debug(
        f"Found {len(learners)} learner(s) on campus",
        extra={"campus": campus_value},
    )
    return learners


async def find_by_name(store: LearnerStore, pattern: str) -> list[LearnerLike]:
    """Learners whose name contains `pattern` as a literal substring, ignoring case.

    `pattern` is plain text, not a regular expression: "^fro" only matches
    names containing the three characters "^fro". SQL LIKE wildcards (%, _)
    are escaped so they also match literally.
    """
    escaped = (
        pattern.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return await store.find_many(
        Learner.name.ilike(f"%{escaped}%", escape=_LIKE_ESCAPE),
    )


async def peers_of(
    store: LearnerStore, learner: LearnerLike,
) -> list[LearnerLike]:
    """Learners sharing campus and year with `learner`, itself included."""
    peers = await store.find_many(
        Learner.campus == learner.campus, Learner.year == learner.year,
    )
    logger.debug(
        f"Found {len(peers)} peer(s) for year {learner.year}",
        extra={"learner_id": str(learner.id), "campus": learner.campus},
    )
    return peers


async def get_learner(store: LearnerStore, learner_id: LearnerId) -> LearnerLike:
    learner = await store.find_one(Learner.id == learner_id)
    if learner is None:
        raise LearnerNotFoundError(str(learner_id))
    return learner


async def create_learner(store: LearnerStore, payload: object) -> LearnerLike:
    """Validate `payload` (applying defaults) and insert it."""
    valid = validate_learner(payload)
    return await store.insert(valid.model_dump(mode="json"))


async def save_learner(store: LearnerStore, learner: LearnerLike) -> LearnerLike:
    """Re-validate an in-memory learner and rewrite it in full."""
    validate_learner({
        "name": learner.name,
        "enrolled": learner.enrolled,
        "year": learner.year,
        "avg": learner.avg,
        "campus": learner.campus,
    })
    return await store.update(learner)
