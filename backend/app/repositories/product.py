from typing import List

from app.models import Product, Release
from app.repositories.base import Repository


class ProductRepository(Repository[Product]):
    model = Product
    entity_name = "Product"


class ReleaseRepository(Repository[Release]):
    model = Release
    entity_name = "Release"

    def find_by_product_id(self, product_id: int) -> List[Release]:
        return self.find_by("product_id", product_id)
