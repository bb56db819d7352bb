from .base import CamelModel, Deleted, Added
from .product import (
    Product, ProductCreate, ProductUpdate, ProductList,
    Release, ReleaseCreate, ReleaseUpdate, ReleaseList
)
from .platform import Platform, PlatformCreate, PlatformUpdate, PlatformList
from .case import (
    TestCase, TestCaseCreate, TestCaseUpdate, TestCaseList,
    CasePlatformsUpdate, CasePlatforms, RelatedCasesUpdate, RelatedCases
)
from .step import (
    Step, StepCreate, StepUpdate, StepList,
    Precondition, PreconditionCreate, PreconditionUpdate, PreconditionList,
    Expectation, ExpectationCreate, ExpectationUpdate, ExpectationList
)
from .run import Run, RunCreate, RunUpdate, RunList, RunCaseCreate, RunCases
