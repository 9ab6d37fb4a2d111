"""Demo Learner - the hardcoded "Frodo" record behind GET / and startup seeding.

Invariants:
    - Only the record named DEMO_LEARNER["name"] is ever touched here
    - seed_demo_learner() is idempotent: it inserts only when no such record exists
    - grade_demo_learner() raises LookupError when the record is missing; the
      catch-all handler turns that into the generic 500
"""

import logging

from learner_api.core.repository_protocols import LearnerLike, LearnerStore
from learner_api.models.learner import Learner
from learner_api.services.learner_queries import create_learner, save_learner

logger = logging.getLogger(__name__)

# No campus: the stored record gets the default.
DEMO_LEARNER = {"name": "Frodo", "enrolled": True, "year": 2024}
DEMO_AVERAGE = 85


async def seed_demo_learner(store: LearnerStore) -> LearnerLike:
    existing = await store.find_one(Learner.name == DEMO_LEARNER["name"])
    if existing is not None:
        return existing
    learner = await create_learner(store, DEMO_LEARNER)
    logger.info(
        "Seeded demo learner", extra={"learner_id": str(learner.id)},
    )
    return learner


async def grade_demo_learner(store: LearnerStore) -> LearnerLike:
    """Set the demo learner's average to DEMO_AVERAGE and persist it."""
    learner = await store.find_one(Learner.name == DEMO_LEARNER["name"])
    if learner is None:
        raise LookupError(f"Demo learner {DEMO_LEARNER['name']!r} not found")
    learner.avg = DEMO_AVERAGE
    return await save_learner(store, learner)
