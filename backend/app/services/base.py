"""
サービス層の共通基盤

各サービスはリクエストごとのセッションを受け取り、複数のリポジトリ操作を
1つのトランザクションにまとめてコミットする。
"""
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.exceptions import ConflictException, InvalidInputException
from app.logging_config import logger


def require_text(value: Optional[str], message: str) -> None:
    """前後の空白を除いて空の文字列を拒否する"""
    if value is None or not value.strip():
        raise InvalidInputException(message)


class BaseService:
    """セッションとトランザクション境界を管理する基底クラス"""

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        ブロック内の変更を1つのトランザクションとして扱う

        正常終了した場合はコミットし、例外が発生した場合はロールバックする。
        一意制約違反は ConflictException に変換する。
        """
        try:
            yield self.session
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"Unique constraint violated, rolled back: {e.orig}")
            raise ConflictException(details={"reason": str(e.orig)}) from e
        except Exception:
            self.session.rollback()
            raise
