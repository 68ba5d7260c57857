"""Product API Package — CRUD REST API for product records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
