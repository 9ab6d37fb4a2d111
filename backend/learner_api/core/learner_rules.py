"""Learner Rules - pure derived values computed from stored learner fields.

Invariants:
    - Nothing here is persisted; values are recomputed on every read
    - A learner without an average is never passing
"""

from learner_api.core.domain_types import PASSING_AVERAGE
from learner_api.core.repository_protocols import LearnerLike


def is_passing(learner: LearnerLike) -> bool:
    """True when the learner has an average of at least PASSING_AVERAGE."""
    return learner.avg is not None and learner.avg >= PASSING_AVERAGE
