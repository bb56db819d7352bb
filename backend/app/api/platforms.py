from fastapi import APIRouter, Depends

from app.api.deps import get_platform_service
from app.logging_config import logger
from app.schemas import Platform, PlatformCreate, PlatformUpdate, PlatformList, Deleted
from app.services import PlatformService

router = APIRouter(prefix="/api/platforms", tags=["platforms"])


@router.get("", response_model=PlatformList)
def list_platforms(service: PlatformService = Depends(get_platform_service)):
    logger.info("Listing platforms")
    return PlatformList(platforms=[Platform.model_validate(p) for p in service.list()])

@router.get("/{id}", response_model=Platform)
def get_platform(id: int, service: PlatformService = Depends(get_platform_service)):
    logger.info(f"Getting platform {id}")
    return Platform.model_validate(service.get(id))

@router.post("", response_model=Platform, status_code=201)
def create_platform(body: PlatformCreate, service: PlatformService = Depends(get_platform_service)):
    logger.info(f"Creating platform: {body.name}")
    return Platform.model_validate(service.create(body.name))

@router.put("/{id}", response_model=Platform)
def update_platform(id: int, body: PlatformUpdate, service: PlatformService = Depends(get_platform_service)):
    logger.info(f"Updating platform {id}")
    return Platform.model_validate(service.update(id, body.name))

@router.delete("/{id}", response_model=Deleted)
def delete_platform(id: int, service: PlatformService = Depends(get_platform_service)):
    logger.info(f"Deleting platform {id}")
    service.delete(id)
    return Deleted()
