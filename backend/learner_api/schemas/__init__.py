"""Pydantic Schemas - learner validation and response shapes.

Invariants:
    - Schemas validate at system boundary (request bodies, stored records before rewrite)
    - Domain types from core/ used for enum fields
"""
