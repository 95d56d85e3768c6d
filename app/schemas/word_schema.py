# app/schemas/word_schema.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
import datetime
from typing import Optional

class WordCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    word: Optional[str] = None
    date: Optional[datetime.date] = None
    baby_id: Optional[int] = None
    category: Optional[str] = None
    user_id: Optional[str] = None

class WordCategoryUpdate(BaseModel):
    category: Optional[str] = None

class WordRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    word: str
    date: datetime.date
    category: Optional[str]
