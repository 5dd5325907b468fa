"""
In-memory product repository.

``ProductRepository`` owns the only copy of the product collection.
Products are copied on the way in and on the way out, so callers can
never mutate stored records behind the repository's back.  A single
lock serialises every access; the ASGI server may run handlers on
several threads.
"""

import threading
from typing import Any, Dict, Iterable, List, Optional

from .core import ProductIn, _make_product
from .errors import DuplicateCode, ProductNotFound
from .models import Product


class ProductRepository:
    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = []
        self._lock = threading.Lock()
        if products is not None:
            self.load(products)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def load(self, products: Iterable[Product]) -> None:
        """Replace the whole collection."""
        copies = [p.model_copy() for p in products]
        with self._lock:
            self._products = copies

    def get_all(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products]

    def get_by_id(self, product_id: int) -> Product:
        with self._lock:
            return self._products[self._index(product_id)].model_copy()

    def get_by_price_gt(self, price: float) -> List[Product]:
        """Products priced strictly above ``price``, in collection order."""
        with self._lock:
            return [p.model_copy() for p in self._products if p.price > price]

    def create(self, product_in: ProductIn) -> Product:
        with self._lock:
            self._check_code(product_in.code_value)
            product = _make_product(self._next_id(), product_in)
            self._products.append(product)
            return product.model_copy()

    def update(self, product_id: int, product_in: ProductIn) -> Product:
        """Overwrite every field of an existing product except its id."""
        with self._lock:
            index = self._index(product_id)
            self._check_code(product_in.code_value, exclude_id=product_id)
            self._products[index] = _make_product(product_id, product_in)
            return self._products[index].model_copy()

    def patch(self, product_id: int, fields: Dict[str, Any]) -> Product:
        """Overwrite only the given fields of an existing product."""
        fields = {k: v for k, v in fields.items() if k != "id"}
        with self._lock:
            index = self._index(product_id)
            if "code_value" in fields:
                self._check_code(fields["code_value"], exclude_id=product_id)
            self._products[index] = self._products[index].model_copy(update=fields)
            return self._products[index].model_copy()

    def delete(self, product_id: int) -> None:
        with self._lock:
            del self._products[self._index(product_id)]

    # ---------------------------
    # Helpers (caller holds the lock)
    # ---------------------------
    def _index(self, product_id: int) -> int:
        for i, product in enumerate(self._products):
            if product.id == product_id:
                return i
        raise ProductNotFound()

    def _check_code(self, code_value: str, exclude_id: Optional[int] = None) -> None:
        for product in self._products:
            if product.code_value == code_value and product.id != exclude_id:
                raise DuplicateCode()

    def _next_id(self) -> int:
        return max((p.id for p in self._products), default=0) + 1
