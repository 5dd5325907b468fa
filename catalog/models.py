# catalog/models.py
from pydantic import BaseModel

class Product(BaseModel):
    id: int
    name: str
    quantity: int
    code_value: str
    is_published: bool
    expiration: str
    price: float
