"""Product Repository — SQLAlchemy implementation of core ProductRepository.

Invariants:
    - Only this module touches the products table; handlers see core Product values
    - Every write commits; the session manager rolls back and maps errors on failure
    - save() is an explicit write-back of the given value (UPDATE ... WHERE id),
      not ORM dirty tracking
    - Excluded fields come back as None on the returned Product
"""

import logging
from typing import Any, Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.errors import ProductNotFoundError
from product_api.core.product import Product
from product_api.core.repository_protocols import OrderBy
from product_api.models.product import Product as ProductModel

logger = logging.getLogger(__name__)

_COLUMNS = ("id", "name", "price", "availability", "created_at", "updated_at")


def _to_domain(row: ProductModel, exclude_fields: Sequence[str] = ()) -> Product:
    values = {
        col: (None if col in exclude_fields else getattr(row, col))
        for col in _COLUMNS
    }
    return Product(**values)


def _order_clause(field: str, direction: str):
    column = getattr(ProductModel, field)
    return column.desc() if direction.lower() == "desc" else column.asc()


class SqlAlchemyProductRepository:
    """Product persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, attrs: dict[str, Any]) -> Product:
        row = ProductModel(**attrs)
        self._db.add(row)
        await self._db.commit()
        await self._db.refresh(row)
        logger.info(f"Product {row.id} created", extra={"product_id": row.id})
        return _to_domain(row)

    async def find_all(
        self,
        order: OrderBy = (),
        exclude_fields: Sequence[str] = (),
    ) -> list[Product]:
        query = select(ProductModel).order_by(
            *(_order_clause(field, direction) for field, direction in order),
        )
        result = await self._db.execute(query)
        return [_to_domain(row, exclude_fields) for row in result.scalars().all()]

    async def find_by_pk(
        self, product_id: int, exclude_fields: Sequence[str] = (),
    ) -> Product | None:
        row = await self._db.get(ProductModel, product_id)
        if row is None:
            return None
        return _to_domain(row, exclude_fields)

    async def save(self, product: Product) -> Product:
        result = await self._db.execute(
            update(ProductModel)
            .where(ProductModel.id == product.id)
            .values(
                name=product.name,
                price=product.price,
                availability=product.availability,
            ),
        )
        if result.rowcount == 0:
            await self._db.rollback()
            raise ProductNotFoundError(product.id)
        await self._db.commit()
        logger.info(
            f"Product {product.id} saved", extra={"product_id": product.id},
        )
        return product

    async def destroy(self, product: Product) -> None:
        row = await self._db.get(ProductModel, product.id)
        if row is None:
            return
        await self._db.delete(row)
        await self._db.commit()
        logger.info(
            f"Product {product.id} deleted", extra={"product_id": product.id},
        )
