from fastapi import APIRouter, Depends

from app.api.deps import get_product_service
from app.logging_config import logger
from app.schemas import Product, ProductCreate, ProductUpdate, ProductList, Deleted
from app.services import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=ProductList)
def list_products(service: ProductService = Depends(get_product_service)):
    logger.info("Listing products")
    return ProductList(products=[Product.model_validate(p) for p in service.list()])

@router.get("/{id}", response_model=Product)
def get_product(id: int, service: ProductService = Depends(get_product_service)):
    logger.info(f"Getting product {id}")
    return Product.model_validate(service.get(id))

@router.post("", response_model=Product, status_code=201)
def create_product(body: ProductCreate, service: ProductService = Depends(get_product_service)):
    logger.info(f"Creating product: {body.name}")
    return Product.model_validate(service.create(body.name))

@router.put("/{id}", response_model=Product)
def update_product(id: int, body: ProductUpdate, service: ProductService = Depends(get_product_service)):
    logger.info(f"Updating product {id}")
    return Product.model_validate(service.update(id, body.name))

@router.delete("/{id}", response_model=Deleted)
def delete_product(id: int, service: ProductService = Depends(get_product_service)):
    logger.info(f"Deleting product {id}")
    service.delete(id)
    return Deleted()
