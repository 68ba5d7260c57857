"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model is imported here so Base.metadata is complete before
      create_all or alembic autogenerate run
"""

from product_api.models.product import Product  # noqa: F401
