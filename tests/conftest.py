"""Shared fixtures: a small product list and an app wired around it."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from catalog.config import Settings
from catalog.main import create_app
from catalog.models import Product
from catalog.repository import ProductRepository

TOKEN = "12345"
FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0)


def make_products():
    return [
        Product(id=1, name="Oil - Margarine", quantity=439, code_value="S82254D",
                is_published=True, expiration="15/12/2031", price=71.42),
        Product(id=2, name="Pineapple - Canned, Rings", quantity=345, code_value="M4637HG",
                is_published=True, expiration="09/08/2030", price=352.79),
        Product(id=3, name="Wine - Red Oakridge Merlot", quantity=367, code_value="T65812Y",
                is_published=False, expiration="24/05/2029", price=179.23),
        Product(id=4, name="Bread - Multigrain Loaf", quantity=210, code_value="B77310K",
                is_published=True, expiration="30/11/2028", price=3.99),
    ]


def new_product_json(**overrides):
    body = {
        "name": "New Product",
        "quantity": 100,
        "code_value": "NewCode123",
        "is_published": True,
        "expiration": "25/10/2030",
        "price": 900.0,
    }
    body.update(overrides)
    return body


@pytest.fixture
def products():
    return make_products()


@pytest.fixture
def repository(products):
    return ProductRepository(products)


@pytest.fixture
def app(repository):
    return create_app(
        settings=Settings(token=TOKEN),
        repository=repository,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth():
    return {"token": TOKEN}
