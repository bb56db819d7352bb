from sqlmodel import Field, SQLModel
from typing import Optional


class Product(SQLModel, table=True):
    """製品モデル"""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, max_length=255)


class Release(SQLModel, table=True):
    """リリースモデル（1つの製品に属する）"""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = None
    # 参照整合性はサービス層で検証する（DBの外部キー制約は張らない）
    product_id: int = Field(index=True)
