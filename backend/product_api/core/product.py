"""Product Domain Type — immutable value handed between handlers and repositories.

Invariants:
    - Product is frozen: mutation means building a new value (dataclasses.replace)
      and writing it back through the repository
    - price > 0 for every persisted Product (guaranteed by the validation rule sets,
      not by this type)
    - Audit fields are None when the repository was asked to exclude them

Design Decisions:
    - Plain dataclass over the ORM row: handlers never see dirty-tracking objects
"""

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any


AUDIT_FIELDS: tuple[str, ...] = ("created_at", "updated_at")


@dataclass(frozen=True)
class Product:
    name: str
    price: float
    availability: bool = True
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize, dropping audit fields that were excluded on load."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in AUDIT_FIELDS and value is None:
                continue
            data[f.name] = value
        return data

    def with_availability_toggled(self) -> "Product":
        return replace(self, availability=not self.availability)

    def with_changes(self, attrs: dict[str, Any]) -> "Product":
        return replace(self, **attrs)


def coerce_bool(value: Any) -> bool:
    """Map the accepted boolean spellings ("true", "0", 1, ...) to bool."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1")
    return bool(value)


def product_attrs(body: dict[str, Any]) -> dict[str, Any]:
    """Pick the writable product fields out of a validated request body.

    Unknown keys are ignored. Values are coerced to their column types so
    numeric strings ("420") and boolean strings ("false") persist correctly.
    """
    attrs: dict[str, Any] = {}
    if "name" in body:
        attrs["name"] = str(body["name"])
    if "price" in body:
        attrs["price"] = float(body["price"])
    if "availability" in body:
        attrs["availability"] = coerce_bool(body["availability"])
    return attrs
