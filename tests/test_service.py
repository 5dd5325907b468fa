# tests/test_service.py
import pytest

from catalog.core import ProductIn
from catalog.errors import NoProductsFound, ProductNotFound
from catalog.service import ProductService
from conftest import new_product_json


@pytest.fixture
def service(repository):
    return ProductService(repository)


def test_get_by_price_gt_without_matches_raises(service):
    with pytest.raises(NoProductsFound):
        service.get_by_price_gt(1_000_000)


def test_no_products_found_is_a_not_found(service):
    with pytest.raises(ProductNotFound):
        service.get_by_price_gt(1_000_000)


def test_get_by_price_gt_with_matches(service):
    assert [p.id for p in service.get_by_price_gt(100)] == [2, 3]


def test_create_then_get_round_trip(service):
    created = service.create(ProductIn(**new_product_json()))
    assert service.get_by_id(created.id) == created


def test_delete_delegates(service, repository):
    service.delete(4)
    assert len(repository) == 3
