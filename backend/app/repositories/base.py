"""
永続化ストアへのアクセスを担当する汎用リポジトリ

リポジトリはセッションに対して追加・更新・削除を行い flush するが、commit はしない。
トランザクションの境界はサービス層が決める。
"""
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete as sa_delete
from sqlalchemy.exc import MultipleResultsFound, NoResultFound
from sqlmodel import Session, SQLModel, select

from app.exceptions import DataIntegrityException, NotFoundException
from app.logging_config import logger

ModelT = TypeVar("ModelT", bound=SQLModel)


class Repository(Generic[ModelT]):
    """エンティティ1種類に対するCRUD操作"""

    model: Type[ModelT]
    entity_name: str = "Entity"

    def __init__(self, session: Session):
        self.session = session

    def find(self, id: int) -> ModelT:
        """
        IDでエンティティを取得する

        Raises:
            NotFoundException: 該当する行が存在しない場合
            DataIntegrityException: 同じIDの行が複数存在する場合
        """
        statement = select(self.model).where(self.model.id == id)
        try:
            return self.session.exec(statement).one()
        except NoResultFound:
            raise NotFoundException(self.entity_name, id) from None
        except MultipleResultsFound:
            logger.error(f"Multiple {self.entity_name} rows share id {id}")
            raise DataIntegrityException(
                f"Multiple {self.entity_name} rows found for id {id}",
                details={"entity": self.entity_name, "id": id}
            ) from None

    def find_all(self) -> List[ModelT]:
        statement = select(self.model).order_by(self.model.id)
        return list(self.session.exec(statement).all())

    def find_by(self, column: str, value: Any, order_by: Optional[List[Any]] = None) -> List[ModelT]:
        """外部キー列で絞り込んで取得する。order_by 未指定の場合はID順"""
        statement = select(self.model).where(getattr(self.model, column) == value)
        statement = statement.order_by(*(order_by or [self.model.id]))
        return list(self.session.exec(statement).all())

    def insert(self, entity: ModelT) -> ModelT:
        """エンティティを追加し、ストアにIDを採番させる"""
        self.session.add(entity)
        self.session.flush()
        self.session.refresh(entity)
        return entity

    def update(self, entity: ModelT) -> ModelT:
        if entity.id is None:
            raise DataIntegrityException(
                f"Cannot update {self.entity_name} without an id",
                details={"entity": self.entity_name}
            )
        self.session.add(entity)
        self.session.flush()
        self.session.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        self.session.delete(entity)
        self.session.flush()

    def delete_by(self, column: str, value: Any) -> int:
        """指定列の値が一致する行をまとめて削除し、削除件数を返す"""
        statement = sa_delete(self.model).where(getattr(self.model, column) == value)
        result = self.session.execute(statement)
        return result.rowcount
