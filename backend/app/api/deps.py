"""
ルーターが使うサービスの依存関係

リクエストごとのセッションを各サービスに渡す。
"""
from fastapi import Depends
from sqlmodel import Session

from app.models import get_session
from app.services import (
    ProductService, ReleaseService, PlatformService, CaseService,
    StepService, PreconditionService, ExpectationService, RunService
)


def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(session)

def get_release_service(session: Session = Depends(get_session)) -> ReleaseService:
    return ReleaseService(session)

def get_platform_service(session: Session = Depends(get_session)) -> PlatformService:
    return PlatformService(session)

def get_case_service(session: Session = Depends(get_session)) -> CaseService:
    return CaseService(session)

def get_step_service(session: Session = Depends(get_session)) -> StepService:
    return StepService(session)

def get_precondition_service(session: Session = Depends(get_session)) -> PreconditionService:
    return PreconditionService(session)

def get_expectation_service(session: Session = Depends(get_session)) -> ExpectationService:
    return ExpectationService(session)

def get_run_service(session: Session = Depends(get_session)) -> RunService:
    return RunService(session)
