from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_step_service
from app.logging_config import logger
from app.schemas import Step, StepCreate, StepUpdate, StepList, Deleted
from app.services import StepService

router = APIRouter(prefix="/api/steps", tags=["steps"])


@router.get("", response_model=StepList)
def list_steps(
    case_id: Optional[int] = Query(None, alias="caseId"),
    service: StepService = Depends(get_step_service)
):
    """ステップの一覧を取得する。caseId を指定した場合は order 順に並ぶ"""
    logger.info(f"Listing steps (case_id={case_id})")
    return StepList(steps=[Step.model_validate(s) for s in service.list(case_id)])

@router.get("/{id}", response_model=Step)
def get_step(id: int, service: StepService = Depends(get_step_service)):
    logger.info(f"Getting step {id}")
    return Step.model_validate(service.get(id))

@router.post("", response_model=Step, status_code=201)
def create_step(body: StepCreate, service: StepService = Depends(get_step_service)):
    logger.info(f"Creating step {body.order} for case {body.case_id}")
    return Step.model_validate(service.create(body.order, body.description, body.case_id))

@router.put("/{id}", response_model=Step)
def update_step(id: int, body: StepUpdate, service: StepService = Depends(get_step_service)):
    logger.info(f"Updating step {id}")
    return Step.model_validate(service.update(id, body.order, body.description))

@router.delete("/{id}", response_model=Deleted)
def delete_step(id: int, service: StepService = Depends(get_step_service)):
    logger.info(f"Deleting step {id}")
    service.delete(id)
    return Deleted()
