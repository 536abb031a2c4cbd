import os

# Settings are read at import time; point everything at SQLite before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from products_api.config import Settings
from products_api.database.database import Database
from products_api.main import create_app
from products_api.models.database_models import Product


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", engine_options={"poolclass": StaticPool})


@pytest.fixture
def database(settings):
    db = Database(settings)
    db.connect()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    db = database.session()
    yield db
    db.close()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database=database)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_product(database):
    def _make(name="Monitor curvo de 49 pulgadas", price=300, status=True):
        db = database.session()
        try:
            product = Product(name=name, price=price, status=status)
            db.add(product)
            db.commit()
            db.refresh(product)
            return product.id
        finally:
            db.close()

    return _make
