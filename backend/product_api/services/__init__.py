"""Services Layer — imperative shell between routes and repositories.

Invariants:
    - Services receive repositories by injection, never open sessions themselves
"""
