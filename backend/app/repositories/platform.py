from typing import Optional

from sqlmodel import select

from app.models import Platform
from app.repositories.base import Repository


class PlatformRepository(Repository[Platform]):
    model = Platform
    entity_name = "Platform"

    def find_by_name(self, name: str) -> Optional[Platform]:
        """名前でプラットフォームを検索する。存在しない場合は None"""
        return self.session.exec(select(Platform).where(Platform.name == name)).first()
