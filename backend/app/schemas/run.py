from datetime import datetime
from typing import Any, List, Optional

from pydantic import field_validator

from app.schemas.base import CamelModel
from app.utils.timestamps import format_timestamp


class RunBase(CamelModel):
    name: str
    # ISO 8601 文字列。解析はサービス層で行う
    start: Optional[str] = None
    end: Optional[str] = None

class RunCreate(RunBase):
    release_id: int

class RunUpdate(RunBase):
    pass

class Run(RunBase):
    id: int
    release_id: int

    @field_validator("start", "end", mode="before")
    @classmethod
    def format_datetime(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return format_timestamp(value)
        return value

class RunList(CamelModel):
    runs: List[Run]


class RunCaseCreate(CamelModel):
    case_id: int

class RunCases(CamelModel):
    """テスト実行に含まれるケースIDの一覧"""
    cases: List[int]
