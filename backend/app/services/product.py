from typing import List, Optional

from sqlmodel import Session

from app.exceptions import NotFoundException, ReferenceNotFoundException
from app.logging_config import logger
from app.models import Product, Release
from app.repositories import ProductRepository, ReleaseRepository
from app.services.base import BaseService, require_text


class ProductService(BaseService):
    """製品の作成・更新・削除"""

    def __init__(self, session: Session):
        super().__init__(session)
        self.products = ProductRepository(session)

    def list(self) -> List[Product]:
        return self.products.find_all()

    def get(self, product_id: int) -> Product:
        return self.products.find(product_id)

    def create(self, name: str) -> Product:
        require_text(name, "Name is required")
        with self.transaction():
            product = self.products.insert(Product(name=name))
        logger.info(f"Created product {product.id}")
        return product

    def update(self, product_id: int, name: str) -> Product:
        require_text(name, "Name is required")
        with self.transaction():
            product = self.products.find(product_id)
            product.name = name
            product = self.products.update(product)
        logger.info(f"Updated product {product_id}")
        return product

    def delete(self, product_id: int) -> None:
        # リリースは削除しない
        with self.transaction():
            self.products.delete(self.products.find(product_id))
        logger.info(f"Deleted product {product_id}")


class ReleaseService(BaseService):
    """リリースの作成・更新・削除。リリースは既存の製品に属する"""

    def __init__(self, session: Session):
        super().__init__(session)
        self.releases = ReleaseRepository(session)
        self.products = ProductRepository(session)

    def list(self, product_id: Optional[int] = None) -> List[Release]:
        if product_id is not None:
            return self.releases.find_by_product_id(product_id)
        return self.releases.find_all()

    def get(self, release_id: int) -> Release:
        return self.releases.find(release_id)

    def create(self, name: str, product_id: int, description: Optional[str] = None) -> Release:
        require_text(name, "Name is required")
        with self.transaction():
            try:
                self.products.find(product_id)
            except NotFoundException:
                logger.warning(f"Release references missing product {product_id}")
                raise ReferenceNotFoundException("Product", product_id, parent=True) from None
            release = self.releases.insert(
                Release(name=name, description=description, product_id=product_id)
            )
        logger.info(f"Created release {release.id} for product {product_id}")
        return release

    def update(self, release_id: int, name: str, description: Optional[str] = None) -> Release:
        require_text(name, "Name is required")
        with self.transaction():
            release = self.releases.find(release_id)
            release.name = name
            release.description = description
            release = self.releases.update(release)
        logger.info(f"Updated release {release_id}")
        return release

    def delete(self, release_id: int) -> None:
        with self.transaction():
            self.releases.delete(self.releases.find(release_id))
        logger.info(f"Deleted release {release_id}")
