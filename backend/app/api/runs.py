from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_run_service
from app.logging_config import logger
from app.schemas import Run, RunCreate, RunUpdate, RunList, RunCaseCreate, RunCases, Deleted, Added
from app.services import RunService

router = APIRouter(prefix="/api/runs", tags=["runs"])


@router.get("", response_model=RunList)
def list_runs(
    release_id: Optional[int] = Query(None, alias="releaseId"),
    service: RunService = Depends(get_run_service)
):
    logger.info(f"Listing runs (release_id={release_id})")
    return RunList(runs=[Run.model_validate(r) for r in service.list(release_id)])

@router.get("/{id}", response_model=Run)
def get_run(id: int, service: RunService = Depends(get_run_service)):
    logger.info(f"Getting run {id}")
    return Run.model_validate(service.get(id))

@router.post("", response_model=Run, status_code=201)
def create_run(body: RunCreate, service: RunService = Depends(get_run_service)):
    """
    テスト実行を作成する

    start / end は ISO 8601 形式 (例: 2026-01-15T10:00:00Z) で指定する。
    """
    logger.info(f"Creating run {body.name} for release {body.release_id}")
    run = service.create(body.name, body.release_id, body.start, body.end)
    return Run.model_validate(run)

@router.put("/{id}", response_model=Run)
def update_run(id: int, body: RunUpdate, service: RunService = Depends(get_run_service)):
    logger.info(f"Updating run {id}")
    return Run.model_validate(service.update(id, body.name, body.start, body.end))

@router.delete("/{id}", response_model=Deleted)
def delete_run(id: int, service: RunService = Depends(get_run_service)):
    logger.info(f"Deleting run {id}")
    service.delete(id)
    return Deleted()

@router.get("/{id}/cases", response_model=RunCases)
def get_run_cases(id: int, service: RunService = Depends(get_run_service)):
    logger.info(f"Getting cases of run {id}")
    return RunCases(cases=service.get_cases(id))

@router.post("/{id}/cases", response_model=Added, status_code=201)
def add_run_case(id: int, body: RunCaseCreate, service: RunService = Depends(get_run_service)):
    logger.info(f"Adding case {body.case_id} to run {id}")
    service.add_case(id, body.case_id)
    return Added()
