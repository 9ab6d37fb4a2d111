"""Learner API Package - schema-validated learner records over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
