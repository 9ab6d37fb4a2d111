"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - LearnerId wraps a UUID; route strings become LearnerId only via parse_learner_id()
    - Campus holds exactly the 7 valid locations; REMOTE is the default
    - MIN_YEAR, MAX_YEAR and PASSING_AVERAGE are the only numeric thresholds in the domain

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for Campus: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID

from learner_api.core.errors import MalformedIdentifierError


# ─── Identity Types ──────────────────────────────────────────────

LearnerId = NewType("LearnerId", UUID)


# ─── Thresholds ──────────────────────────────────────────────────

MIN_YEAR = 1995
MAX_YEAR = 2**31 - 1  # INTEGER column range
PASSING_AVERAGE = 70


# ─── Enums ───────────────────────────────────────────────────────

class Campus(str, Enum):
    """Campus locations a learner can belong to."""
    REMOTE = "Remote"
    BOSTON = "Boston"
    NEW_YORK = "New York"
    DENVER = "Denver"
    LOS_ANGELES = "Los Angeles"
    SEATTLE = "Seattle"
    DALLAS = "Dallas"


CAMPUS_VALUES: tuple[str, ...] = tuple(c.value for c in Campus)


def parse_learner_id(raw: str) -> LearnerId:
    """Parse a route parameter into a LearnerId.

    Accepts any textual UUID form the uuid module accepts (hyphenated, hex,
    braces, urn). Raises MalformedIdentifierError otherwise.
    """
    try:
        return LearnerId(UUID(raw.strip()))
    except (ValueError, AttributeError):
        raise MalformedIdentifierError(str(raw)) from None
