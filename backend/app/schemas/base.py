from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSONのキーをキャメルケースで扱うスキーマの基底クラス"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


class Deleted(CamelModel):
    deleted: bool = True


class Added(CamelModel):
    added: bool = True
