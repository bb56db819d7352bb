from typing import List, Optional

from sqlmodel import Session

from app.exceptions import NotFoundException, ReferenceNotFoundException
from app.logging_config import logger
from app.models import Step, Precondition, Expectation
from app.repositories import (
    StepRepository, PreconditionRepository, ExpectationRepository, TestCaseRepository
)
from app.services.base import BaseService, require_text


def _require_parent(repository, entity: str, parent_id: int) -> None:
    """本文で指定された親エンティティが存在しなければ 404 とする"""
    try:
        repository.find(parent_id)
    except NotFoundException:
        logger.warning(f"{entity} {parent_id} not found")
        raise ReferenceNotFoundException(entity, parent_id, parent=True) from None


class StepService(BaseService):
    """テストケースのステップ"""

    def __init__(self, session: Session):
        super().__init__(session)
        self.steps = StepRepository(session)
        self.cases = TestCaseRepository(session)

    def list(self, case_id: Optional[int] = None) -> List[Step]:
        if case_id is not None:
            return self.steps.find_by_case_id(case_id)
        return self.steps.find_all()

    def get(self, step_id: int) -> Step:
        return self.steps.find(step_id)

    def create(self, order: int, description: str, case_id: int) -> Step:
        require_text(description, "Description is required")
        with self.transaction():
            _require_parent(self.cases, "Case", case_id)
            step = self.steps.insert(Step(order=order, description=description, case_id=case_id))
        logger.info(f"Created step {step.id} (order {order}) for case {case_id}")
        return step

    def update(self, step_id: int, order: int, description: str) -> Step:
        require_text(description, "Description is required")
        with self.transaction():
            step = self.steps.find(step_id)
            step.order = order
            step.description = description
            step = self.steps.update(step)
        logger.info(f"Updated step {step_id}")
        return step

    def delete(self, step_id: int) -> None:
        with self.transaction():
            self.steps.delete(self.steps.find(step_id))
        logger.info(f"Deleted step {step_id}")


class PreconditionService(BaseService):
    """テストケースの前提条件"""

    def __init__(self, session: Session):
        super().__init__(session)
        self.preconditions = PreconditionRepository(session)
        self.cases = TestCaseRepository(session)

    def list(self, case_id: Optional[int] = None) -> List[Precondition]:
        if case_id is not None:
            return self.preconditions.find_by_case_id(case_id)
        return self.preconditions.find_all()

    def get(self, precondition_id: int) -> Precondition:
        return self.preconditions.find(precondition_id)

    def create(self, description: str, case_id: int) -> Precondition:
        require_text(description, "Description is required")
        with self.transaction():
            _require_parent(self.cases, "Case", case_id)
            precondition = self.preconditions.insert(
                Precondition(description=description, case_id=case_id)
            )
        logger.info(f"Created precondition {precondition.id} for case {case_id}")
        return precondition

    def update(self, precondition_id: int, description: str) -> Precondition:
        require_text(description, "Description is required")
        with self.transaction():
            precondition = self.preconditions.find(precondition_id)
            precondition.description = description
            precondition = self.preconditions.update(precondition)
        logger.info(f"Updated precondition {precondition_id}")
        return precondition

    def delete(self, precondition_id: int) -> None:
        with self.transaction():
            self.preconditions.delete(self.preconditions.find(precondition_id))
        logger.info(f"Deleted precondition {precondition_id}")


class ExpectationService(BaseService):
    """ステップの期待結果"""

    def __init__(self, session: Session):
        super().__init__(session)
        self.expectations = ExpectationRepository(session)
        self.steps = StepRepository(session)

    def list(self, step_id: Optional[int] = None) -> List[Expectation]:
        if step_id is not None:
            return self.expectations.find_by_step_id(step_id)
        return self.expectations.find_all()

    def get(self, expectation_id: int) -> Expectation:
        return self.expectations.find(expectation_id)

    def create(self, description: str, step_id: int) -> Expectation:
        require_text(description, "Description is required")
        with self.transaction():
            _require_parent(self.steps, "Step", step_id)
            expectation = self.expectations.insert(
                Expectation(description=description, step_id=step_id)
            )
        logger.info(f"Created expectation {expectation.id} for step {step_id}")
        return expectation

    def update(self, expectation_id: int, description: str) -> Expectation:
        require_text(description, "Description is required")
        with self.transaction():
            expectation = self.expectations.find(expectation_id)
            expectation.description = description
            expectation = self.expectations.update(expectation)
        logger.info(f"Updated expectation {expectation_id}")
        return expectation

    def delete(self, expectation_id: int) -> None:
        with self.transaction():
            self.expectations.delete(self.expectations.find(expectation_id))
        logger.info(f"Deleted expectation {expectation_id}")
