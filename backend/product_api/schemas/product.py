"""Product Schemas — Pydantic models describing the API contract.

Invariants:
    - Request bodies are validated by the route rule sets, not by these models;
      ProductCreate/ProductUpdate only feed the OpenAPI document
    - Response envelopes always wrap the payload in "data"
    - Audit timestamps are optional: omitted where the handler excluded them
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Body of POST /api/products."""
    name: str = Field(examples=["Imac"])
    price: float = Field(gt=0, examples=[200])


class ProductUpdate(ProductCreate):
    """Body of PUT /api/products/{id}."""
    availability: bool = Field(examples=[True])


class ProductOut(BaseModel):
    id: int = Field(description="The Product Id", examples=[1])
    name: str = Field(description="The Product name", examples=["LaunchPad Novation"])
    price: float = Field(description="The Product price", examples=[990])
    availability: bool = Field(description="The Product availability", examples=[True])
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductEnvelope(BaseModel):
    data: ProductOut


class ProductListEnvelope(BaseModel):
    data: list[ProductOut]


class DeletedEnvelope(BaseModel):
    data: str = Field(examples=["product deleted"])


class NotFoundBody(BaseModel):
    error: str = Field(examples=["Product Not Found"])


class ViolationOut(BaseModel):
    type: str = "field"
    value: Any = None
    msg: str
    path: str
    location: str


class ValidationErrorBody(BaseModel):
    errors: list[ViolationOut]
