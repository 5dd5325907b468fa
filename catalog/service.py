"""
Product service.

A thin layer over ``ProductRepository``.  The only policy it adds is
that a price search with no matches is an error (``NoProductsFound``)
rather than an empty list, so the handler can answer 404.
"""

import logging
from typing import Any, Dict, List

from .core import ProductIn
from .errors import NoProductsFound
from .models import Product
from .repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def get_all(self) -> List[Product]:
        return self.repository.get_all()

    def get_by_id(self, product_id: int) -> Product:
        return self.repository.get_by_id(product_id)

    def get_by_price_gt(self, price: float) -> List[Product]:
        products = self.repository.get_by_price_gt(price)
        if not products:
            raise NoProductsFound()
        return products

    def create(self, product_in: ProductIn) -> Product:
        product = self.repository.create(product_in)
        logger.info("Created product %s (code %s)", product.id, product.code_value)
        return product

    def update(self, product_id: int, product_in: ProductIn) -> Product:
        product = self.repository.update(product_id, product_in)
        logger.info("Updated product %s", product_id)
        return product

    def patch(self, product_id: int, fields: Dict[str, Any]) -> Product:
        product = self.repository.patch(product_id, fields)
        logger.info("Patched product %s fields=%s", product_id, sorted(fields))
        return product

    def delete(self, product_id: int) -> None:
        self.repository.delete(product_id)
        logger.info("Deleted product %s", product_id)
