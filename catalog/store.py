"""
Read-only JSON file store.

The products file is a JSON array of product objects using the wire
field names (``id``, ``name``, ``quantity``, ``code_value``,
``is_published``, ``expiration``, ``price``).  Nothing is ever written
back: changes made through the API live only in memory.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from .errors import ProductNotFound, StoreError
from .models import Product

logger = logging.getLogger(__name__)

_PRODUCT_LIST = TypeAdapter(List[Product])


class JsonStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get_all(self) -> List[Product]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Cannot read products file %s: %s", self.path, e)
            raise StoreError(f"unable to read {self.path}") from e
        try:
            return _PRODUCT_LIST.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error("Malformed products file %s: %s", self.path, e)
            raise StoreError(f"malformed products file {self.path}") from e

    def get_one(self, product_id: int) -> Product:
        for product in self.get_all():
            if product.id == product_id:
                return product
        raise ProductNotFound()
