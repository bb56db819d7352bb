from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_expectation_service
from app.logging_config import logger
from app.schemas import Expectation, ExpectationCreate, ExpectationUpdate, ExpectationList, Deleted
from app.services import ExpectationService

router = APIRouter(prefix="/api/expectations", tags=["expectations"])


@router.get("", response_model=ExpectationList)
def list_expectations(
    step_id: Optional[int] = Query(None, alias="stepId"),
    service: ExpectationService = Depends(get_expectation_service)
):
    logger.info(f"Listing expectations (step_id={step_id})")
    items = service.list(step_id)
    return ExpectationList(expectations=[Expectation.model_validate(e) for e in items])

@router.get("/{id}", response_model=Expectation)
def get_expectation(id: int, service: ExpectationService = Depends(get_expectation_service)):
    logger.info(f"Getting expectation {id}")
    return Expectation.model_validate(service.get(id))

@router.post("", response_model=Expectation, status_code=201)
def create_expectation(
    body: ExpectationCreate,
    service: ExpectationService = Depends(get_expectation_service)
):
    logger.info(f"Creating expectation for step {body.step_id}")
    return Expectation.model_validate(service.create(body.description, body.step_id))

@router.put("/{id}", response_model=Expectation)
def update_expectation(
    id: int,
    body: ExpectationUpdate,
    service: ExpectationService = Depends(get_expectation_service)
):
    logger.info(f"Updating expectation {id}")
    return Expectation.model_validate(service.update(id, body.description))

@router.delete("/{id}", response_model=Deleted)
def delete_expectation(id: int, service: ExpectationService = Depends(get_expectation_service)):
    logger.info(f"Deleting expectation {id}")
    service.delete(id)
    return Deleted()
