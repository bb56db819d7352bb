from sqlmodel import Field, SQLModel
from typing import Optional


class Platform(SQLModel, table=True):
    """プラットフォームモデル（Windows, Linux など）"""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True, max_length=255)
