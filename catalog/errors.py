"""
Domain errors for the product catalog.

Every error carries the HTTP status it maps to and the message that is
sent back inside the ``{"error": ...}`` envelope.  The repository and
service layers raise them; ``catalog.main`` registers one exception
handler that renders any ``CatalogError`` into a JSON response.
"""


class CatalogError(Exception):
    """Base class for all catalog errors."""

    status_code: int = 400
    message: str = "catalog error"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidId(CatalogError):
    message = "invalid product id"


class InvalidPrice(CatalogError):
    message = "invalid product price"


class InvalidData(CatalogError):
    message = "invalid product data"


class InvalidDate(CatalogError):
    message = "invalid expiration date format"


class ExpiredDate(InvalidDate):
    message = "expiration date must be after current date"


class DuplicateCode(CatalogError):
    message = "invalid product code value"


class ProductNotFound(CatalogError):
    status_code = 404
    message = "product not found"


class NoProductsFound(ProductNotFound):
    message = "no products found"


class Unauthorized(CatalogError):
    status_code = 401
    message = "invalid token"


class StoreError(CatalogError):
    status_code = 500
    message = "unable to load products"
