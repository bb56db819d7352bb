from typing import List

from app.schemas.base import CamelModel


class PlatformBase(CamelModel):
    name: str

class PlatformCreate(PlatformBase):
    pass

class PlatformUpdate(PlatformBase):
    pass

class Platform(PlatformBase):
    id: int

class PlatformList(CamelModel):
    platforms: List[Platform]
