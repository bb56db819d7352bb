from typing import List, Optional

from app.schemas.base import CamelModel


class ProductBase(CamelModel):
    name: str

class ProductCreate(ProductBase):
    pass

class ProductUpdate(ProductBase):
    pass

class Product(ProductBase):
    id: int

class ProductList(CamelModel):
    products: List[Product]


class ReleaseBase(CamelModel):
    name: str
    description: Optional[str] = None

class ReleaseCreate(ReleaseBase):
    product_id: int

class ReleaseUpdate(ReleaseBase):
    pass

class Release(ReleaseBase):
    id: int
    product_id: int

class ReleaseList(CamelModel):
    releases: List[Release]
