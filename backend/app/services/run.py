"""
テスト実行と、実行に含めるテストケースの管理
"""
from typing import List, Optional

from sqlmodel import Session

from app.exceptions import NotFoundException, ReferenceNotFoundException
from app.logging_config import logger
from app.models import Run, RunCase
from app.repositories import RunRepository, RunCaseRepository, ReleaseRepository, TestCaseRepository
from app.services.base import BaseService, require_text
from app.utils.timestamps import parse_timestamp


class RunService(BaseService):
    """テスト実行のCRUDとケースの追加"""

    def __init__(self, session: Session):
        super().__init__(session)
        self.runs = RunRepository(session)
        self.run_cases = RunCaseRepository(session)
        self.releases = ReleaseRepository(session)
        self.cases = TestCaseRepository(session)

    def list(self, release_id: Optional[int] = None) -> List[Run]:
        if release_id is not None:
            return self.runs.find_by_release_id(release_id)
        return self.runs.find_all()

    def get(self, run_id: int) -> Run:
        return self.runs.find(run_id)

    def create(
        self,
        name: str,
        release_id: int,
        start: Optional[str] = None,
        end: Optional[str] = None
    ) -> Run:
        """
        テスト実行を作成する

        Args:
            name: 実行名
            release_id: 対象リリースのID
            start: 開始日時 (ISO 8601)
            end: 終了日時 (ISO 8601)
        """
        require_text(name, "Name is required")
        with self.transaction():
            try:
                self.releases.find(release_id)
            except NotFoundException:
                logger.warning(f"Run references missing release {release_id}")
                raise ReferenceNotFoundException("Release", release_id, parent=True) from None
            started_at = parse_timestamp(start, "start")
            ended_at = parse_timestamp(end, "end")
            run = self.runs.insert(
                Run(name=name, release_id=release_id, start=started_at, end=ended_at)
            )
        logger.info(f"Created run {run.id} for release {release_id}")
        return run

    def update(
        self,
        run_id: int,
        name: str,
        start: Optional[str] = None,
        end: Optional[str] = None
    ) -> Run:
        """
        テスト実行を更新する

        start / end が None の場合は保存済みの値を維持する。どちらの日時も
        実行を変更する前に解析するため、不正な値があれば何も更新されない。
        """
        require_text(name, "Name is required")
        with self.transaction():
            run = self.runs.find(run_id)
            started_at = parse_timestamp(start, "start")
            ended_at = parse_timestamp(end, "end")
            run.name = name
            if started_at is not None:
                run.start = started_at
            if ended_at is not None:
                run.end = ended_at
            run = self.runs.update(run)
        logger.info(f"Updated run {run_id}")
        return run

    def delete(self, run_id: int) -> None:
        """テスト実行と、実行に含まれるケースの関連を削除する"""
        with self.transaction():
            run = self.runs.find(run_id)
            removed = self.run_cases.delete_by_run_id(run_id)
            self.runs.delete(run)
        logger.info(f"Deleted run {run_id} with {removed} case links")

    def get_cases(self, run_id: int) -> List[int]:
        self.runs.find(run_id)
        return [link.case_id for link in self.run_cases.find_by_run_id(run_id)]

    def add_case(self, run_id: int, case_id: int) -> RunCase:
        """
        テスト実行にケースを追加する

        Raises:
            NotFoundException: 実行が存在しない場合
            ReferenceNotFoundException: ケースが存在しない場合 (404)
            ConflictException: 既に追加済みの場合
        """
        with self.transaction():
            self.runs.find(run_id)
            try:
                self.cases.find(case_id)
            except NotFoundException:
                logger.warning(f"Case {case_id} not found for run {run_id}")
                raise ReferenceNotFoundException("Case", case_id, parent=True) from None
            run_case = self.run_cases.insert(RunCase(run_id=run_id, case_id=case_id))
        logger.info(f"Added case {case_id} to run {run_id}")
        return run_case
