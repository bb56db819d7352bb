from typing import List

from app.models import TestCase, CasePlatform, RelatedCase
from app.repositories.base import Repository


class TestCaseRepository(Repository[TestCase]):
    __test__ = False
    model = TestCase
    entity_name = "Case"


class CasePlatformRepository(Repository[CasePlatform]):
    model = CasePlatform
    entity_name = "CasePlatform"

    def find_by_case_id(self, case_id: int) -> List[CasePlatform]:
        return self.find_by("case_id", case_id)

    def delete_by_case_id(self, case_id: int) -> int:
        return self.delete_by("case_id", case_id)


class RelatedCaseRepository(Repository[RelatedCase]):
    model = RelatedCase
    entity_name = "RelatedCase"

    def find_by_case_id(self, case_id: int) -> List[RelatedCase]:
        return self.find_by("case_id", case_id)

    def delete_by_case_id(self, case_id: int) -> int:
        return self.delete_by("case_id", case_id)
