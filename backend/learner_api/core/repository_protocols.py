"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All store IO is reached through LearnerStore
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - LearnerStore exposes exactly four capabilities (insert, find_one, find_many,
      update); every query helper in services/ is written against these
    - Criteria are opaque to core: the shell implementation decides what a
      filter expression is (SQLAlchemy column expressions for SqlLearnerStore)
"""

from typing import Any, Protocol
from uuid import UUID


class LearnerLike(Protocol):
    """Structural contract for learner records passed between layers.

    Avoids coupling core functions to the ORM model.
    """
    id: UUID
    name: str
    enrolled: bool
    year: int
    avg: float | None
    campus: str


class LearnerStore(Protocol):
    """Contract for learner persistence - implemented by shell."""
    async def insert(self, fields: dict[str, Any]) -> LearnerLike: ...
    async def find_one(self, *criteria: Any) -> LearnerLike | None: ...
    async def find_many(self, *criteria: Any) -> list[LearnerLike]: ...
    async def update(self, learner: LearnerLike) -> LearnerLike: ...
