"""Product Routes — CRUD endpoints under /api/products.

Invariants:
    - Every route with an {id} runs PRODUCT_ID_RULES (or a superset) before the handler
    - Bodies are read and checked by validated(...), so the rule sets alone decide
      which requests reach a handler and how many violations are reported
    - Routes never contain business logic (delegate to ProductHandlers)

Design Decisions:
    - Request bodies documented via openapi_extra from the pydantic schemas:
      /docs shows the contract while runtime validation stays declarative
"""

from fastapi import APIRouter, Depends, Path, status

from product_api.api.dependencies import (
    ValidatedInput, get_product_handlers, validated,
)
from product_api.core.validation_rules import (
    CREATE_PRODUCT_RULES, PRODUCT_ID_RULES, UPDATE_PRODUCT_RULES,
)
from product_api.schemas.product import (
    DeletedEnvelope,
    NotFoundBody,
    ProductCreate,
    ProductEnvelope,
    ProductListEnvelope,
    ProductUpdate,
    ValidationErrorBody,
)
from product_api.services.product_handlers import ProductHandlers

router = APIRouter(prefix="/api/products", tags=["Products"])

_ID_DESCRIPTION = "The ID of the product (integer)"


def _json_body(schema) -> dict:
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": schema.model_json_schema()},
            },
        },
    }


_BAD_REQUEST = {"model": ValidationErrorBody, "description": "Bad Request - invalid input data"}
_NOT_FOUND = {"model": NotFoundBody, "description": "Product Not Found"}


@router.get(
    "",
    response_model=ProductListEnvelope,
    response_model_exclude_none=True,
    summary="Get a list of products",
    description="Return a list of products ordered by name, descending",
)
async def get_products(
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    return await handlers.list_all()


@router.get(
    "/{id}",
    response_model=ProductEnvelope,
    response_model_exclude_none=True,
    summary="Get a product by id",
    description="Return a product based on its unique ID",
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
    dependencies=[Depends(validated(PRODUCT_ID_RULES))],
)
async def get_product_by_id(
    id: str = Path(description=_ID_DESCRIPTION, examples=["1"]),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    return await handlers.get_by_id(int(id))


@router.post(
    "",
    response_model=ProductEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Creates a new product",
    description="Return a new record in the database",
    responses={400: _BAD_REQUEST},
    openapi_extra=_json_body(ProductCreate),
)
async def create_product(
    payload: ValidatedInput = Depends(validated(CREATE_PRODUCT_RULES)),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    return await handlers.create(payload.body)


@router.put(
    "/{id}",
    response_model=ProductEnvelope,
    response_model_exclude_none=True,
    summary="Updates a product with user input",
    description="Returns the updated product",
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
    openapi_extra=_json_body(ProductUpdate),
)
async def update_product(
    id: str = Path(description=_ID_DESCRIPTION, examples=["1"]),
    payload: ValidatedInput = Depends(validated(UPDATE_PRODUCT_RULES)),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    return await handlers.update(int(id), payload.body)


@router.patch(
    "/{id}",
    response_model=ProductEnvelope,
    response_model_exclude_none=True,
    summary="Update Product Availability",
    description="Flips the availability flag and returns the product",
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
    dependencies=[Depends(validated(PRODUCT_ID_RULES))],
)
async def update_availability(
    id: str = Path(description=_ID_DESCRIPTION, examples=["1"]),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    return await handlers.update_availability(int(id))


@router.delete(
    "/{id}",
    response_model=DeletedEnvelope,
    summary="Deletes product by id",
    description="Returns a confirmation message",
    responses={400: _BAD_REQUEST, 404: _NOT_FOUND},
    dependencies=[Depends(validated(PRODUCT_ID_RULES))],
)
async def delete_product(
    id: str = Path(description=_ID_DESCRIPTION, examples=["1"]),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    return await handlers.delete(int(id))
