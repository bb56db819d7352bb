from sqlmodel import Field, SQLModel
from sqlalchemy import Column, DateTime, UniqueConstraint
from typing import Optional
from datetime import datetime

class Run(SQLModel, table=True):
    """テスト実行モデル（1つのリリースに属する）"""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    # UTC の naive datetime として保存する（列の型はタイムゾーンなしで固定）
    start: Optional[datetime] = Field(default=None, sa_column=Column("start", DateTime(timezone=False), nullable=True))
    end: Optional[datetime] = Field(default=None, sa_column=Column("end", DateTime(timezone=False), nullable=True))
    release_id: int = Field(index=True)

class RunCase(SQLModel, table=True):
    """テスト実行とテストケースの中間テーブル"""
    __table_args__ = (
        UniqueConstraint("run_id", "case_id", name="uq_runcase_run_case"),
    )
    id: Optional[int] = Field(default=None, primary_key=True)
    run_id: int = Field(index=True)
    case_id: int = Field(index=True)
