from typing import List

from app.models import Step, Expectation, Precondition
from app.repositories.base import Repository


class StepRepository(Repository[Step]):
    model = Step
    entity_name = "Step"

    def find_by_case_id(self, case_id: int) -> List[Step]:
        """ケースのステップを order 昇順で取得する（同じ order はID順）"""
        return self.find_by("case_id", case_id, order_by=[Step.order, Step.id])


class PreconditionRepository(Repository[Precondition]):
    model = Precondition
    entity_name = "Precondition"

    def find_by_case_id(self, case_id: int) -> List[Precondition]:
        return self.find_by("case_id", case_id)


class ExpectationRepository(Repository[Expectation]):
    model = Expectation
    entity_name = "Expectation"

    def find_by_step_id(self, step_id: int) -> List[Expectation]:
        return self.find_by("step_id", step_id)
