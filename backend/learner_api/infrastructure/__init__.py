"""Infrastructure Layer - database sessions, the SQL learner store, logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy errors surface as core.errors.DatabaseError
"""
