"""SQL Learner Store - LearnerStore implementation over an AsyncSession.

Invariants:
    - One store per request, wrapping that request's session
    - insert() and update() commit immediately: each write touches one row
    - find_many() orders by name then id so repeated reads return the same sequence
    - Criteria are SQLAlchemy column expressions over models.Learner
"""

import logging
from typing import Any

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from learner_api.infrastructure.database import get_db
from learner_api.models.learner import Learner

logger = logging.getLogger(__name__)


class SqlLearnerStore:
    """LearnerStore backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert(self, fields: dict[str, Any]) -> Learner:
        learner = Learner(**fields)
        self._db.add(learner)
        await self._db.commit()
        await self._db.refresh(learner)
        logger.info(
            f"Inserted learner {learner.name!r}",
            extra={"learner_id": str(learner.id)},
        )
        return learner

    async def find_one(self, *criteria: Any) -> Learner | None:
        result = await self._db.execute(
            select(Learner).where(*criteria).limit(1),
        )
        return result.scalars().first()

    async def find_many(self, *criteria: Any) -> list[Learner]:
        result = await self._db.execute(
            select(Learner).where(*criteria).order_by(Learner.name, Learner.id),
        )
        return list(result.scalars().all())

    async def update(self, learner: Learner) -> Learner:
        self._db.add(learner)
        await self._db.commit()
        await self._db.refresh(learner)
        logger.info(
            f"Updated learner {learner.name!r}",
            extra={"learner_id": str(learner.id)},
        )
        return learner


async def get_learner_store(
    db: AsyncSession = Depends(get_db),
) -> SqlLearnerStore:
    """FastAPI dependency: a store bound to the request's session."""
    return SqlLearnerStore(db)
