"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, so test fakes need no base class
    - Async in Protocol: implementations do IO; handlers await them
"""

from typing import Any, Protocol, Sequence

from product_api.core.product import Product


OrderBy = Sequence[tuple[str, str]]


class ProductRepository(Protocol):
    """Contract for product persistence — implemented by shell."""
    async def create(self, attrs: dict[str, Any]) -> Product: ...
    async def find_all(
        self,
        order: OrderBy = (),
        exclude_fields: Sequence[str] = (),
    ) -> list[Product]: ...
    async def find_by_pk(
        self, product_id: int, exclude_fields: Sequence[str] = (),
    ) -> Product | None: ...
    async def save(self, product: Product) -> Product: ...
    async def destroy(self, product: Product) -> None: ...
