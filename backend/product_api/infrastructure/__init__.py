"""Infrastructure Layer — database, repositories, and cross-cutting middleware.

Invariants:
    - SQLAlchemy errors are mapped to core DatabaseError before leaving this layer
"""
