from typing import List

from app.schemas.base import CamelModel


class StepBase(CamelModel):
    order: int
    description: str

class StepCreate(StepBase):
    case_id: int

class StepUpdate(StepBase):
    pass

class Step(StepBase):
    id: int
    case_id: int

class StepList(CamelModel):
    steps: List[Step]


class PreconditionBase(CamelModel):
    description: str

class PreconditionCreate(PreconditionBase):
    case_id: int

class PreconditionUpdate(PreconditionBase):
    pass

class Precondition(PreconditionBase):
    id: int
    case_id: int

class PreconditionList(CamelModel):
    preconditions: List[Precondition]


class ExpectationBase(CamelModel):
    description: str

class ExpectationCreate(ExpectationBase):
    step_id: int

class ExpectationUpdate(ExpectationBase):
    pass

class Expectation(ExpectationBase):
    id: int
    step_id: int

class ExpectationList(CamelModel):
    expectations: List[Expectation]
