"""Infrastructure Layer — database gateway and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/
    - All driver errors mapped to core/errors.py types before leaving this layer

Design Decisions:
    - Thin wrappers over SQLAlchemy and logging (single responsibility)
"""
