from typing import Iterable, List

from sqlmodel import Session

from app.logging_config import logger
from app.models import Platform
from app.repositories import PlatformRepository
from app.services.base import BaseService, require_text


class PlatformService(BaseService):
    """プラットフォームの管理と既定値の投入"""

    def __init__(self, session: Session):
        super().__init__(session)
        self.platforms = PlatformRepository(session)

    def list(self) -> List[Platform]:
        return self.platforms.find_all()

    def get(self, platform_id: int) -> Platform:
        return self.platforms.find(platform_id)

    def create(self, name: str) -> Platform:
        require_text(name, "Name is required")
        with self.transaction():
            platform = self.platforms.insert(Platform(name=name))
        logger.info(f"Created platform {platform.id}")
        return platform

    def update(self, platform_id: int, name: str) -> Platform:
        require_text(name, "Name is required")
        with self.transaction():
            platform = self.platforms.find(platform_id)
            platform.name = name
            platform = self.platforms.update(platform)
        logger.info(f"Updated platform {platform_id}")
        return platform

    def delete(self, platform_id: int) -> None:
        # ケースとの関連 (CasePlatform) はそのまま残る
        with self.transaction():
            self.platforms.delete(self.platforms.find(platform_id))
        logger.info(f"Deleted platform {platform_id}")

    def seed_defaults(self, names: Iterable[str]) -> List[Platform]:
        """
        既定のプラットフォームのうち未登録のものを追加する

        何度呼び出しても同じ名前のプラットフォームが重複することはない。

        Returns:
            今回追加したプラットフォームのリスト
        """
        created = []
        with self.transaction():
            for name in names:
                if not name or not name.strip():
                    continue
                if self.platforms.find_by_name(name) is not None:
                    continue
                created.append(self.platforms.insert(Platform(name=name)))
        if created:
            logger.info(f"Seeded default platforms: {[p.name for p in created]}")
        return created
