"""Tests for the Product schema and service."""
import logging

import pytest
from sqlalchemy.exc import IntegrityError

from datamodel.models import Product
from datamodel.schemas import ProductCreate, ProductResponse
from datamodel.services import MissingRequiredField, TypeMismatch

PEN = {"name": "Pen", "price": 10, "description": "Blue pen"}


def test_create_product_round_trip(products, db_session):
    """Test a minimal product reads back with defaults and timestamps."""
    product = products.create(PEN)

    stored = db_session.query(Product).filter(Product.id == product.id).first()
    assert stored.name == "Pen"
    assert stored.price == 10
    assert stored.description == "Blue pen"
    assert stored.stock == 0
    assert stored.product_image is None
    assert stored.category_id is None
    assert stored.owner_id is None
    assert stored.created_at is not None
    assert stored.updated_at is not None


@pytest.mark.parametrize("missing", ["name", "price", "description"])
def test_create_product_missing_required_field(products, db_session, missing):
    """Test creating a product without a required field fails."""
    data = {k: v for k, v in PEN.items() if k != missing}

    with pytest.raises(MissingRequiredField) as exc_info:
        products.create(data)

    assert exc_info.value.field == missing
    assert exc_info.value.model == "Product"
    assert db_session.query(Product).count() == 0


def test_create_product_none_for_required_field(products):
    """Test an explicit None counts as a missing required field."""
    with pytest.raises(MissingRequiredField):
        products.create({**PEN, "description": None})


def test_create_product_empty_name(products):
    """Test an empty name counts as missing."""
    with pytest.raises(MissingRequiredField):
        products.create({**PEN, "name": ""})


def test_create_product_invalid_price(products):
    """Test a price that cannot be coerced to a number fails."""
    with pytest.raises(TypeMismatch) as exc_info:
        products.create({**PEN, "price": "ten"})

    assert exc_info.value.field == "price"


def test_create_product_coerces_numeric_string(products):
    """Test numeric strings are coerced to the declared type."""
    product = products.create({**PEN, "price": "12.5", "stock": "3"})

    assert product.price == 12.5
    assert product.stock == 3


def test_create_product_accepts_document_keys(products, categories, users):
    """Test camelCase and short reference keys are accepted."""
    category = categories.create({"name": "Stationery"})
    owner = users.create({"username": "bob", "email": "bob@example.com", "password": "pw"})

    product = products.create({
        **PEN,
        "productImage": "https://img.example.com/pen.png",
        "stock": 5,
        "category": category.id,
        "owner": owner.id,
    })

    assert product.product_image == "https://img.example.com/pen.png"
    assert product.stock == 5
    assert product.category_id == category.id
    assert product.owner_id == owner.id


def test_create_product_from_schema(products):
    """Test creating from a ProductCreate instance."""
    product = products.create(ProductCreate(name="Notebook", price=4.5, description="A5 lined", stock=7))

    data = ProductResponse.model_validate(product)
    assert data.name == "Notebook"
    assert data.stock == 7
    assert data.id == product.id


def test_create_product_rejects_non_mapping(products):
    with pytest.raises(TypeMismatch):
        products.create(["Pen", 10, "Blue pen"])


def test_get_product_not_found(products):
    assert products.get_by_id(9999) is None


def test_update_product(products):
    """Test a partial update leaves other fields unchanged."""
    product = products.create({**PEN, "stock": 10})

    updated = products.update(product.id, {"name": "Red Pen", "price": 12})

    assert updated.name == "Red Pen"
    assert updated.price == 12
    assert updated.description == "Blue pen"
    assert updated.stock == 10  # Stock should remain unchanged
    assert updated.updated_at >= updated.created_at


def test_update_product_clears_optional_field(products):
    product = products.create({**PEN, "productImage": "pen.png"})

    updated = products.update(product.id, {"product_image": None})

    assert updated.product_image is None


def test_update_product_rejects_none_for_required_field(products):
    """Test a required field cannot be cleared."""
    product = products.create(PEN)

    with pytest.raises(MissingRequiredField) as exc_info:
        products.update(product.id, {"price": None})

    assert exc_info.value.field == "price"
    assert products.get_by_id(product.id).price == 10


def test_update_product_not_found(products):
    assert products.update(9999, {"name": "Ghost"}) is None


def test_delete_product(products):
    """Test deleting a product."""
    product = products.create(PEN)

    assert products.delete(product.id) is True
    assert products.get_by_id(product.id) is None
    assert products.delete(product.id) is False


def test_resolve_references(products, categories, users):
    """Test category and owner resolve to the referenced records."""
    category = categories.create({"name": "Stationery"})
    owner = users.create({"username": "Carol", "email": "carol@example.com", "password": "pw"})
    product = products.create({**PEN, "category": category.id, "owner": owner.id})

    assert products.get_category(product).name == "Stationery"
    assert products.get_owner(product).username == "carol"
    assert product.owner.id == owner.id


def test_unset_references_resolve_to_none(products):
    product = products.create(PEN)

    assert products.get_category(product) is None
    assert products.get_owner(product) is None


def test_references_are_weak(products, users):
    """Test deleting the owner leaves the product in place."""
    owner = users.create({"username": "dave", "email": "dave@example.com", "password": "pw"})
    product = products.create({**PEN, "owner": owner.id})

    assert users.delete(owner.id) is True

    remaining = products.get_by_id(product.id)
    assert remaining is not None
    assert products.get_owner(remaining) is None


def test_dangling_reference_resolves_to_none(products):
    product = products.create({**PEN, "category": 4242})

    assert product.category_id == 4242
    assert products.get_category(product) is None


def test_create_product_is_logged(products, caplog):
    caplog.set_level(logging.INFO, logger="datamodel")

    product = products.create(PEN)

    assert f"Product #{product.id} created" in caplog.text


def test_create_product_rejects_boolean_price(products):
    """Test a boolean is not accepted as a number."""
    with pytest.raises(TypeMismatch) as exc_info:
        products.create({**PEN, "price": True})

    assert exc_info.value.field == "price"


def test_create_product_none_stock(products, db_session):
    """Test None for the defaulted stock field is a type error, not a missing field."""
    with pytest.raises(TypeMismatch) as exc_info:
        products.create({**PEN, "stock": None})

    assert exc_info.value.field == "stock"
    assert db_session.query(Product).count() == 0


def test_update_product_none_stock(products, caplog):
    """Test None for stock is rejected before reaching the database."""
    product = products.create({**PEN, "stock": 4})
    caplog.set_level(logging.INFO, logger="datamodel")

    with pytest.raises(TypeMismatch) as exc_info:
        products.update(product.id, {"stock": None})

    assert exc_info.value.field == "stock"
    assert products.get_by_id(product.id).stock == 4
    assert "ERROR" not in caplog.text


def test_not_null_integrity_error_names_column(products):
    """Test a NOT NULL failure from the database maps to the named column."""
    error = IntegrityError("UPDATE products", {}, Exception("NOT NULL constraint failed: products.stock"))

    translated = products._integrity_error(error)

    assert isinstance(translated, TypeMismatch)
    assert translated.field == "stock"
