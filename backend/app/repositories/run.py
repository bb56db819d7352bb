from typing import List

from app.models import Run, RunCase
from app.repositories.base import Repository


class RunRepository(Repository[Run]):
    model = Run
    entity_name = "Run"

    def find_by_release_id(self, release_id: int) -> List[Run]:
        return self.find_by("release_id", release_id)


class RunCaseRepository(Repository[RunCase]):
    model = RunCase
    entity_name = "RunCase"

    def find_by_run_id(self, run_id: int) -> List[RunCase]:
        return self.find_by("run_id", run_id)

    def delete_by_run_id(self, run_id: int) -> int:
        return self.delete_by("run_id", run_id)
