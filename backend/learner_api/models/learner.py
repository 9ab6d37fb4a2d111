"""Learner ORM - persists one learner record in the `learners` table.

Invariants:
    - id is UUID primary key, assigned once on insert, never updated
    - name, enrolled, year, campus are non-nullable; avg is optional
    - year >= MIN_YEAR and campus in Campus are enforced again by CHECK constraints
    - passing is derived from avg on read; it has no column

Design Decisions:
    - Secondary indexes on name, year, avg, campus: one per canned query
    - campus stored as String, not a DB enum: CHECK constraint keeps the set
      portable between PostgreSQL and SQLite (tests)
"""

import uuid

from sqlalchemy import Boolean, CheckConstraint, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from learner_api.core.domain_types import CAMPUS_VALUES, MIN_YEAR, Campus
from learner_api.core.learner_rules import is_passing
from learner_api.db.base import Base


_CAMPUS_SQL_LIST = ", ".join(f"'{c}'" for c in CAMPUS_VALUES)


class Learner(Base):
    """Learner entity - a single enrolled (or formerly enrolled) student."""
    __tablename__ = "learners"
    __table_args__ = (
        CheckConstraint(f"year >= {MIN_YEAR}", name="ck_learners_min_year"),
        CheckConstraint(
            f"campus IN ({_CAMPUS_SQL_LIST})", name="ck_learners_campus",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    enrolled: Mapped[bool] = mapped_column(Boolean, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    avg: Mapped[float | None] = mapped_column(Float, nullable=True, index=True)
    campus: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Campus.REMOTE.value, index=True,
    )

    @property
    def passing(self) -> bool:
        return is_passing(self)

    def __repr__(self) -> str:
        return f"<Learner {self.id} {self.name!r} {self.campus} {self.year}>"
