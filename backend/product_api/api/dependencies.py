"""Route Dependencies — DB session, handler wiring, and rule-set validation.

Invariants:
    - The DB manager is read from app.state (set by create_app), never imported
    - validated(rule_set) runs the whole rule set before any handler or DB work;
      a non-empty result raises RequestValidationFailed (400 via error handlers)
    - Malformed JSON bodies are reported in the same {"errors": [...]} shape
    - A body that is not a JSON object is validated as an empty object, and so
      is any body not sent with a JSON content type
"""

import json
from dataclasses import dataclass, field
from typing import Any, AsyncGenerator, Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.errors import RequestValidationFailed
from product_api.core.validate_input import Violation, ensure_valid
from product_api.core.validation_rules import Location, RuleSet
from product_api.infrastructure.product_repository import SqlAlchemyProductRepository
from product_api.services.product_handlers import ProductHandlers


@dataclass(frozen=True)
class ValidatedInput:
    params: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session


def get_product_handlers(db: AsyncSession = Depends(get_db)) -> ProductHandlers:
    return ProductHandlers(SqlAlchemyProductRepository(db))


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"Invalid JSON constant {name}")


def is_json_content(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_json_body(request: Request) -> dict[str, Any]:
    if not is_json_content(request.headers.get("content-type", "")):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise RequestValidationFailed([
            Violation("body", Location.BODY, "Malformed JSON body"),
        ])
    return body if isinstance(body, dict) else {}


def validated(rule_set: RuleSet) -> Callable:
    """Build a dependency that enforces rule_set on the current request."""

    async def dependency(request: Request) -> ValidatedInput:
        params = dict(request.path_params)
        body = await read_json_body(request)
        ensure_valid(rule_set, params, body)
        return ValidatedInput(params=params, body=body)

    return dependency
