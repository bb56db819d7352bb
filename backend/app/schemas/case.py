from typing import List, Optional

from app.schemas.base import CamelModel


class TestCaseBase(CamelModel):
    __test__ = False
    case_number: int
    name: str
    description: Optional[str] = None

class TestCaseCreate(TestCaseBase):
    platform_ids: List[int]

class TestCaseUpdate(TestCaseBase):
    pass

class TestCase(TestCaseBase):
    id: int

class TestCaseList(CamelModel):
    cases: List[TestCase]


class CasePlatformsUpdate(CamelModel):
    platform_ids: List[int]

class CasePlatforms(CamelModel):
    """ケースに関連付けられたプラットフォームIDの一覧"""
    platforms: List[int]


class RelatedCasesUpdate(CamelModel):
    related_case_ids: List[int]

class RelatedCases(CamelModel):
    """ケースの関連ケースIDの一覧"""
    related_cases: List[int]
