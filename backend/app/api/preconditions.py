from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_precondition_service
from app.logging_config import logger
from app.schemas import Precondition, PreconditionCreate, PreconditionUpdate, PreconditionList, Deleted
from app.services import PreconditionService

router = APIRouter(prefix="/api/preconditions", tags=["preconditions"])


@router.get("", response_model=PreconditionList)
def list_preconditions(
    case_id: Optional[int] = Query(None, alias="caseId"),
    service: PreconditionService = Depends(get_precondition_service)
):
    logger.info(f"Listing preconditions (case_id={case_id})")
    items = service.list(case_id)
    return PreconditionList(preconditions=[Precondition.model_validate(p) for p in items])

@router.get("/{id}", response_model=Precondition)
def get_precondition(id: int, service: PreconditionService = Depends(get_precondition_service)):
    logger.info(f"Getting precondition {id}")
    return Precondition.model_validate(service.get(id))

@router.post("", response_model=Precondition, status_code=201)
def create_precondition(
    body: PreconditionCreate,
    service: PreconditionService = Depends(get_precondition_service)
):
    logger.info(f"Creating precondition for case {body.case_id}")
    return Precondition.model_validate(service.create(body.description, body.case_id))

@router.put("/{id}", response_model=Precondition)
def update_precondition(
    id: int,
    body: PreconditionUpdate,
    service: PreconditionService = Depends(get_precondition_service)
):
    logger.info(f"Updating precondition {id}")
    return Precondition.model_validate(service.update(id, body.description))

@router.delete("/{id}", response_model=Deleted)
def delete_precondition(id: int, service: PreconditionService = Depends(get_precondition_service)):
    logger.info(f"Deleting precondition {id}")
    service.delete(id)
    return Deleted()
