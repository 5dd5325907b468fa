# tests/test_repository.py
import pytest

from catalog.core import ProductIn
from catalog.errors import DuplicateCode, ProductNotFound
from catalog.repository import ProductRepository
from conftest import new_product_json


def test_get_by_id_returns_matching_product(repository, products):
    for p in products:
        assert repository.get_by_id(p.id) == p


def test_get_by_id_missing():
    repo = ProductRepository([])
    with pytest.raises(ProductNotFound):
        repo.get_by_id(1)


def test_get_by_price_gt_keeps_order_and_is_strict(repository):
    found = repository.get_by_price_gt(71.42)
    assert [p.id for p in found] == [2, 3]


def test_get_by_price_gt_no_match_is_empty(repository):
    assert repository.get_by_price_gt(10_000) == []


def test_create_assigns_next_id(repository):
    created = repository.create(ProductIn(**new_product_json()))
    assert created.id == 5
    assert repository.get_by_id(5) == created
    assert len(repository) == 5


def test_create_after_delete_does_not_reuse_ids(repository):
    repository.delete(2)
    created = repository.create(ProductIn(**new_product_json()))
    assert created.id == 5


def test_create_duplicate_code_leaves_collection_unchanged(repository):
    before = repository.get_all()
    with pytest.raises(DuplicateCode):
        repository.create(ProductIn(**new_product_json(code_value="S82254D")))
    assert repository.get_all() == before


def test_update_overwrites_all_fields_but_id(repository):
    updated = repository.update(3, ProductIn(**new_product_json()))
    assert updated.id == 3
    assert updated.name == "New Product"
    assert repository.get_by_id(3) == updated


def test_update_may_keep_own_code(repository):
    updated = repository.update(1, ProductIn(**new_product_json(code_value="S82254D")))
    assert updated.code_value == "S82254D"


def test_update_rejects_code_of_another_product(repository):
    with pytest.raises(DuplicateCode):
        repository.update(1, ProductIn(**new_product_json(code_value="M4637HG")))
    assert repository.get_by_id(1).code_value == "S82254D"


def test_update_missing(repository):
    with pytest.raises(ProductNotFound):
        repository.update(99, ProductIn(**new_product_json()))


def test_patch_changes_only_given_fields(repository):
    patched = repository.patch(1, {"is_published": False, "quantity": 0})
    assert patched.is_published is False
    assert patched.quantity == 0
    assert patched.name == "Oil - Margarine"
    assert patched.price == 71.42


def test_patch_cannot_change_id(repository):
    patched = repository.patch(1, {"id": 42, "name": "Renamed"})
    assert patched.id == 1
    assert repository.get_by_id(1).name == "Renamed"


def test_patch_duplicate_code(repository):
    with pytest.raises(DuplicateCode):
        repository.patch(1, {"code_value": "B77310K"})


def test_delete_is_permanent(repository):
    repository.delete(2)
    with pytest.raises(ProductNotFound):
        repository.get_by_id(2)
    with pytest.raises(ProductNotFound):
        repository.delete(2)


def test_returned_products_are_copies(repository):
    p = repository.get_by_id(1)
    p.name = "changed outside"
    assert repository.get_by_id(1).name == "Oil - Margarine"


def test_input_products_are_copied(products):
    repo = ProductRepository(products)
    products[0].price = 0
    assert repo.get_by_id(1).price == 71.42


def test_load_replaces_collection(repository, products):
    repository.load(products[:1])
    assert len(repository) == 1
