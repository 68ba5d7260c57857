"""Product Handlers — one method per product operation, over a ProductRepository.

Invariants:
    - Input reaching a handler has already passed its validation rule set
    - A missing record always raises ProductNotFoundError ("Product Not Found")
    - Mutations build a new Product value and write it back via repository.save()
    - Return values are response bodies: {"data": ...}

Design Decisions:
    - Handlers depend on the ProductRepository protocol only, so they run
      unchanged against SQLAlchemy or an in-memory fake
"""

import logging
from typing import Any

from product_api.core.errors import ProductNotFoundError
from product_api.core.product import AUDIT_FIELDS, Product, product_attrs
from product_api.core.repository_protocols import ProductRepository

logger = logging.getLogger(__name__)

LIST_ORDER = (("name", "desc"),)
DELETED_MESSAGE = "product deleted"


class ProductHandlers:
    """Thin adapters from validated input to repository calls."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def create(self, body: dict[str, Any]) -> dict:
        product = await self._repository.create(product_attrs(body))
        return {"data": product.to_dict()}

    async def list_all(self) -> dict:
        products = await self._repository.find_all(
            order=LIST_ORDER, exclude_fields=AUDIT_FIELDS,
        )
        return {"data": [p.to_dict() for p in products]}

    async def get_by_id(self, product_id: int) -> dict:
        product = await self._get_or_404(product_id)
        return {"data": product.to_dict()}

    async def update(self, product_id: int, body: dict[str, Any]) -> dict:
        product = await self._get_or_404(product_id)
        saved = await self._repository.save(
            product.with_changes(product_attrs(body)),
        )
        return {"data": saved.to_dict()}

    async def update_availability(self, product_id: int) -> dict:
        product = await self._get_or_404(product_id)
        saved = await self._repository.save(product.with_availability_toggled())
        return {"data": saved.to_dict()}

    async def delete(self, product_id: int) -> dict:
        product = await self._get_or_404(product_id)
        await self._repository.destroy(product)
        return {"data": DELETED_MESSAGE}

    async def _get_or_404(self, product_id: int) -> Product:
        product = await self._repository.find_by_pk(
            product_id, exclude_fields=AUDIT_FIELDS,
        )
        if product is None:
            logger.info(
                f"Product {product_id} not found",
                extra={"product_id": product_id},
            )
            raise ProductNotFoundError(product_id)
        return product
