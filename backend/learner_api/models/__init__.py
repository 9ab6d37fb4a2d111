"""ORM Models - SQLAlchemy declarative models for the learner store.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model is imported here so Base.metadata is complete once the package loads
"""

from learner_api.models.learner import Learner  # noqa: F401
