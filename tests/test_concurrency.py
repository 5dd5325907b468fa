# tests/test_concurrency.py
from concurrent.futures import ThreadPoolExecutor

from catalog.core import ProductIn
from catalog.errors import DuplicateCode
from catalog.repository import ProductRepository
from conftest import new_product_json


def _try_create(repo, code_value):
    try:
        return repo.create(ProductIn(**new_product_json(code_value=code_value)))
    except DuplicateCode:
        return None


def test_concurrent_creates_with_same_code():
    repo = ProductRepository([])
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: _try_create(repo, "LAST-ONE"), range(32)))
    created = [r for r in results if r is not None]
    assert len(created) == 1
    assert len(repo) == 1


def test_concurrent_creates_get_unique_ids():
    repo = ProductRepository([])
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda i: _try_create(repo, f"CODE-{i}"), range(50)))
    ids = sorted(r.id for r in results)
    assert ids == list(range(1, 51))
