"""Error Handlers — global exception handlers for the Product API.

Invariants:
    - ProductApiError → exc.to_response() with exc.http_status
      ({"errors": [...]} for validation, {"error": "..."} otherwise)
    - RequestValidationError → 400 {"errors": [...]}, same shape as rule-set violations
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ProductApiError), framework validation, catch-all
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from product_api.core.errors import ProductApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_product_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_product_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ProductApiError)
    async def product_error_handler(request: Request, exc: ProductApiError):
        """Handle all Product API domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"ProductApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Reshape pydantic errors into rule-set violations."""
    errors = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        location = loc[0] if loc else "body"
        if location == "path":
            location = "params"
        errors.append({
            "type": "field",
            "msg": e["msg"],
            "path": ".".join(loc[1:]) or location,
            "location": location,
        })
    return {"errors": errors}
