import asyncio

import pytest
from sqlalchemy.exc import IntegrityError

from products_api.models.database_models import Product
from products_api.models.schemas.product import ProductCreate, ProductUpdate
from products_api.services.product import ProductService


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def service(session):
    return ProductService(session)


def test_create_defaults_status_and_timestamps(service):
    product = run(service.create(ProductCreate(name="Mouse", price=30)))
    assert product.id is not None
    assert product.status is True
    assert product.created_at is not None
    assert product.updated_at is not None


def test_list_all_orders_by_id(service):
    a = run(service.create(ProductCreate(name="A", price=1)))
    b = run(service.create(ProductCreate(name="B", price=2)))
    assert [p.id for p in run(service.list_all())] == [b.id, a.id]
    assert [p.id for p in run(service.list_all(descending=False))] == [a.id, b.id]


def test_get_by_id_missing(service):
    assert run(service.get_by_id(999)) is None


def test_update_overwrites_all_fields(service):
    product = run(service.create(ProductCreate(name="Viejo", price=10)))
    updated = run(service.update(product, ProductUpdate(name="Nuevo", price=20, status=False)))
    assert (updated.id, updated.name, updated.price, updated.status) == (product.id, "Nuevo", 20, False)


def test_toggle_status(service):
    product = run(service.create(ProductCreate(name="Mouse", price=30)))
    assert run(service.toggle_status(product)).status is False
    assert run(service.toggle_status(product)).status is True


def test_delete(service):
    product = run(service.create(ProductCreate(name="Mouse", price=30)))
    product_id = product.id
    run(service.delete(product))
    assert run(service.get_by_id(product_id)) is None


def test_constraint_violation_rolls_back(service, session):
    with pytest.raises(IntegrityError):
        run(service.save(Product(name="Gratis", price=0)))

    # the session is usable again after the rollback
    product = run(service.create(ProductCreate(name="Mouse", price=30)))
    assert run(service.list_all()) == [product]


def test_get_by_id_outside_column_range(service):
    assert run(service.get_by_id(2 ** 31)) is None
    assert run(service.get_by_id(10 ** 20)) is None
    assert run(service.get_by_id(-(2 ** 31) - 1)) is None
