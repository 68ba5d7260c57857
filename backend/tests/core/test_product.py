"""Product value type — serialization, explicit mutation, body coercion."""

from datetime import datetime, timezone

from product_api.core.product import Product, coerce_bool, product_attrs


def test_to_dict_drops_excluded_audit_fields():
    product = Product(id=1, name="Imac", price=200.0)
    assert product.to_dict() == {
        "name": "Imac", "price": 200.0, "availability": True, "id": 1,
    }


def test_to_dict_keeps_loaded_audit_fields():
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    product = Product(id=1, name="Imac", price=200.0, created_at=now, updated_at=now)
    assert product.to_dict()["created_at"] == now
    assert product.to_dict()["updated_at"] == now


def test_toggle_returns_new_value():
    product = Product(id=1, name="Imac", price=200.0, availability=True)
    toggled = product.with_availability_toggled()
    assert toggled.availability is False
    assert product.availability is True


def test_with_changes_keeps_identity():
    product = Product(id=7, name="Imac", price=200.0)
    changed = product.with_changes({"name": "Mac Mini", "price": 99.0})
    assert changed.id == 7
    assert changed.name == "Mac Mini"
    assert changed.price == 99.0


def test_product_attrs_ignores_unknown_keys_and_coerces():
    attrs = product_attrs({
        "name": "Imac", "price": "420", "availability": "false", "id": 99, "color": "red",
    })
    assert attrs == {"name": "Imac", "price": 420.0, "availability": False}


def test_product_attrs_leaves_absent_fields_out():
    assert product_attrs({"name": "Imac", "price": 1}) == {"name": "Imac", "price": 1.0}


def test_coerce_bool_spellings():
    assert coerce_bool(True) is True
    assert coerce_bool("true") is True
    assert coerce_bool("1") is True
    assert coerce_bool(1) is True
    assert coerce_bool("false") is False
    assert coerce_bool("0") is False
    assert coerce_bool(0) is False
