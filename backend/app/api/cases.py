from fastapi import APIRouter, Depends

from app.api.deps import get_case_service
from app.logging_config import logger
from app.schemas import (
    TestCase, TestCaseCreate, TestCaseUpdate, TestCaseList, Deleted,
    CasePlatformsUpdate, CasePlatforms, RelatedCasesUpdate, RelatedCases
)
from app.services import CaseService

router = APIRouter(prefix="/api/cases", tags=["cases"])


@router.get("", response_model=TestCaseList)
def list_cases(service: CaseService = Depends(get_case_service)):
    logger.info("Listing cases")
    return TestCaseList(cases=[TestCase.model_validate(c) for c in service.list()])

@router.get("/{id}", response_model=TestCase)
def get_case(id: int, service: CaseService = Depends(get_case_service)):
    logger.info(f"Getting case {id}")
    return TestCase.model_validate(service.get(id))

@router.post("", response_model=TestCase, status_code=201)
def create_case(body: TestCaseCreate, service: CaseService = Depends(get_case_service)):
    """
    テストケースを作成する

    platformIds に1件以上の既存プラットフォームを指定する必要がある。
    """
    logger.info(f"Creating case #{body.case_number}: {body.name}")
    case = service.create(body.case_number, body.name, body.platform_ids, body.description)
    return TestCase.model_validate(case)

@router.put("/{id}", response_model=TestCase)
def update_case(id: int, body: TestCaseUpdate, service: CaseService = Depends(get_case_service)):
    logger.info(f"Updating case {id}")
    case = service.update(id, body.case_number, body.name, body.description)
    return TestCase.model_validate(case)

@router.delete("/{id}", response_model=Deleted)
def delete_case(id: int, service: CaseService = Depends(get_case_service)):
    logger.info(f"Deleting case {id}")
    service.delete(id)
    return Deleted()

@router.get("/{id}/platforms", response_model=CasePlatforms)
def get_case_platforms(id: int, service: CaseService = Depends(get_case_service)):
    logger.info(f"Getting platforms of case {id}")
    return CasePlatforms(platforms=service.get_platforms(id))

@router.put("/{id}/platforms", response_model=CasePlatforms)
def set_case_platforms(
    id: int,
    body: CasePlatformsUpdate,
    service: CaseService = Depends(get_case_service)
):
    """ケースのプラットフォームを置き換える"""
    logger.info(f"Setting platforms of case {id}: {body.platform_ids}")
    return CasePlatforms(platforms=service.set_platforms(id, body.platform_ids))

@router.get("/{id}/related", response_model=RelatedCases)
def get_related_cases(id: int, service: CaseService = Depends(get_case_service)):
    logger.info(f"Getting related cases of case {id}")
    return RelatedCases(related_cases=service.get_related(id))

@router.put("/{id}/related", response_model=RelatedCases)
def set_related_cases(
    id: int,
    body: RelatedCasesUpdate,
    service: CaseService = Depends(get_case_service)
):
    """ケースの関連ケースを置き換える。空のリストで関連をすべて解除する"""
    logger.info(f"Setting related cases of case {id}: {body.related_case_ids}")
    return RelatedCases(related_cases=service.set_related(id, body.related_case_ids))
