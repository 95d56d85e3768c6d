from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional

class BabyCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    user_id: Optional[str] = None      # sent as "userId"
    photo_url: Optional[str] = None    # sent as "photoUrl"

class BabyUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    photo_url: Optional[str] = None

class BabyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    photo_url: Optional[str]
    user_id: str
    created_at: Optional[datetime] = None
