from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_release_service
from app.logging_config import logger
from app.schemas import Release, ReleaseCreate, ReleaseUpdate, ReleaseList, Deleted
from app.services import ReleaseService

router = APIRouter(prefix="/api/releases", tags=["releases"])


@router.get("", response_model=ReleaseList)
def list_releases(
    product_id: Optional[int] = Query(None, alias="productId"),
    service: ReleaseService = Depends(get_release_service)
):
    """リリースの一覧を取得する。productId を指定した場合はその製品のリリースのみ"""
    logger.info(f"Listing releases (product_id={product_id})")
    return ReleaseList(releases=[Release.model_validate(r) for r in service.list(product_id)])

@router.get("/{id}", response_model=Release)
def get_release(id: int, service: ReleaseService = Depends(get_release_service)):
    logger.info(f"Getting release {id}")
    return Release.model_validate(service.get(id))

@router.post("", response_model=Release, status_code=201)
def create_release(body: ReleaseCreate, service: ReleaseService = Depends(get_release_service)):
    logger.info(f"Creating release {body.name} for product {body.product_id}")
    release = service.create(body.name, body.product_id, body.description)
    return Release.model_validate(release)

@router.put("/{id}", response_model=Release)
def update_release(id: int, body: ReleaseUpdate, service: ReleaseService = Depends(get_release_service)):
    logger.info(f"Updating release {id}")
    return Release.model_validate(service.update(id, body.name, body.description))

@router.delete("/{id}", response_model=Deleted)
def delete_release(id: int, service: ReleaseService = Depends(get_release_service)):
    logger.info(f"Deleting release {id}")
    service.delete(id)
    return Deleted()
