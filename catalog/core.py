import re
from datetime import datetime
from typing import Optional, Dict, Any

from pydantic import BaseModel, ConfigDict

from .errors import InvalidId, InvalidPrice, InvalidDate, ExpiredDate
from .models import Product

EXPIRATION_FORMAT = "%d/%m/%Y"
_EXPIRATION_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1

# JSON types must match exactly ("100" is not a quantity); NaN/Infinity can't be rendered back
_REQUEST_CONFIG = ConfigDict(strict=True, allow_inf_nan=False)

class ProductIn(BaseModel):
    model_config = _REQUEST_CONFIG

    name: str
    quantity: int
    code_value: str
    is_published: bool
    expiration: str
    price: float

class ProductPatch(BaseModel):
    model_config = _REQUEST_CONFIG

    name: Optional[str] = None
    quantity: Optional[int] = None
    code_value: Optional[str] = None
    is_published: Optional[bool] = None
    expiration: Optional[str] = None
    price: Optional[float] = None

    def changes(self) -> Dict[str, Any]:
        # explicit nulls count as "not provided"
        return self.model_dump(exclude_unset=True, exclude_none=True)

def _make_product(product_id: int, p: ProductIn) -> Product:
    return Product(id=product_id, **p.model_dump())

def parse_id(raw: str) -> int:
    if raw is None or not _INT_RE.fullmatch(raw):
        raise InvalidId()
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidId()
    return value

def parse_price(raw: Optional[str]) -> float:
    if raw is None or raw != raw.strip() or "_" in raw:
        raise InvalidPrice()
    try:
        return float(raw)
    except ValueError:
        raise InvalidPrice()

def validate_expiration(value: str, now: Optional[datetime] = None) -> datetime:
    """
    Parse a DD/MM/YYYY expiration date and make sure it lies in the future.
    The parsed date is midnight of that day, so today's date is rejected.
    """
    if not isinstance(value, str) or not _EXPIRATION_RE.fullmatch(value):
        raise InvalidDate()
    try:
        parsed = datetime.strptime(value, EXPIRATION_FORMAT)
    except ValueError:
        raise InvalidDate()
    now = now or datetime.now()
    if parsed <= now:
        raise ExpiredDate()
    return parsed
