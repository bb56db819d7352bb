"""
テストケースと、そのプラットフォーム・関連ケースの管理

ケースの削除と関連の置き換えは複数の行にまたがるため、すべて1つの
トランザクション内で行う。途中で失敗した場合は何も変更されない。
"""
from typing import List, Optional

from sqlmodel import Session

from app.exceptions import InvalidInputException, NotFoundException, ReferenceNotFoundException
from app.logging_config import logger
from app.models import TestCase, CasePlatform, RelatedCase
from app.repositories import (
    TestCaseRepository, CasePlatformRepository, RelatedCaseRepository, PlatformRepository
)
from app.services.base import BaseService, require_text


class CaseService(BaseService):
    """テストケースのCRUDと多対多の関連操作"""

    def __init__(self, session: Session):
        super().__init__(session)
        self.cases = TestCaseRepository(session)
        self.platforms = PlatformRepository(session)
        self.case_platforms = CasePlatformRepository(session)
        self.related_cases = RelatedCaseRepository(session)

    def list(self) -> List[TestCase]:
        return self.cases.find_all()

    def get(self, case_id: int) -> TestCase:
        return self.cases.find(case_id)

    def create(
        self,
        case_number: int,
        name: str,
        platform_ids: List[int],
        description: Optional[str] = None
    ) -> TestCase:
        """
        テストケースを作成し、指定されたプラットフォームに関連付ける

        Args:
            case_number: ケース番号（一意）
            name: ケース名
            platform_ids: 関連付けるプラットフォームIDのリスト（1件以上）
            description: 説明

        Raises:
            InvalidInputException: 名前が空、またはプラットフォームが指定されていない場合
            ReferenceNotFoundException: 存在しないプラットフォームが含まれる場合
            ConflictException: ケース番号が既に使われている場合
        """
        require_text(name, "Name is required")
        if not platform_ids:
            raise InvalidInputException("At least one platform is required")

        with self.transaction():
            self._check_platforms(platform_ids)
            case = self.cases.insert(
                TestCase(case_number=case_number, name=name, description=description)
            )
            for platform_id in platform_ids:
                self.case_platforms.insert(CasePlatform(case_id=case.id, platform_id=platform_id))
        logger.info(f"Created case {case.id} (#{case_number}) on platforms {platform_ids}")
        return case

    def update(
        self,
        case_id: int,
        case_number: int,
        name: str,
        description: Optional[str] = None
    ) -> TestCase:
        require_text(name, "Name is required")
        with self.transaction():
            case = self.cases.find(case_id)
            case.case_number = case_number
            case.name = name
            case.description = description
            case = self.cases.update(case)
        logger.info(f"Updated case {case_id}")
        return case

    def delete(self, case_id: int) -> None:
        """
        ケースを削除する

        プラットフォームとの関連と、このケースが持つ関連ケースの行も削除する。
        ステップ、前提条件、テスト実行との関連は残る。
        """
        with self.transaction():
            case = self.cases.find(case_id)
            platforms_removed = self.case_platforms.delete_by_case_id(case_id)
            related_removed = self.related_cases.delete_by_case_id(case_id)
            self.cases.delete(case)
        logger.info(
            f"Deleted case {case_id} with {platforms_removed} platform links "
            f"and {related_removed} related links"
        )

    def get_platforms(self, case_id: int) -> List[int]:
        self.cases.find(case_id)
        return [link.platform_id for link in self.case_platforms.find_by_case_id(case_id)]

    def set_platforms(self, case_id: int, platform_ids: List[int]) -> List[int]:
        """
        ケースのプラットフォームを指定されたリストで置き換える

        検証がすべて通るまで既存の関連には触れない。
        """
        if not platform_ids:
            raise InvalidInputException("At least one platform is required")

        with self.transaction():
            self.cases.find(case_id)
            self._check_platforms(platform_ids)
            self.case_platforms.delete_by_case_id(case_id)
            for platform_id in platform_ids:
                self.case_platforms.insert(CasePlatform(case_id=case_id, platform_id=platform_id))
        logger.info(f"Replaced platforms of case {case_id} with {platform_ids}")
        return list(platform_ids)

    def get_related(self, case_id: int) -> List[int]:
        self.cases.find(case_id)
        return [link.related_case_id for link in self.related_cases.find_by_case_id(case_id)]

    def set_related(self, case_id: int, related_case_ids: List[int]) -> List[int]:
        """
        ケースの関連ケースを指定されたリストで置き換える

        空のリストを渡すと関連をすべて解除する。自分自身を含む場合は
        リスト全体を拒否する。
        """
        with self.transaction():
            self.cases.find(case_id)
            if case_id in related_case_ids:
                raise InvalidInputException("Case cannot be related to itself")
            for related_case_id in related_case_ids:
                try:
                    self.cases.find(related_case_id)
                except NotFoundException:
                    logger.warning(f"Related case {related_case_id} not found for case {case_id}")
                    raise ReferenceNotFoundException("Related case", related_case_id) from None
            self.related_cases.delete_by_case_id(case_id)
            for related_case_id in related_case_ids:
                self.related_cases.insert(
                    RelatedCase(case_id=case_id, related_case_id=related_case_id)
                )
        logger.info(f"Replaced related cases of case {case_id} with {related_case_ids}")
        return list(related_case_ids)

    def _check_platforms(self, platform_ids: List[int]) -> None:
        for platform_id in platform_ids:
            try:
                self.platforms.find(platform_id)
            except NotFoundException:
                logger.warning(f"Platform {platform_id} not found")
                raise ReferenceNotFoundException("Platform", platform_id) from None
