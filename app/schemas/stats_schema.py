# app/schemas/stats_schema.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List

class CategoryCountOut(BaseModel):
    category: str
    count: int

class StatsSummaryResponse(BaseModel):
    # serialized as today, yesterday, thisWeek, lastWeek, total, topCategory, topCategories
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    today: int
    yesterday: int
    this_week: int
    last_week: int
    total: int
    top_category: str
    top_categories: List[CategoryCountOut]

class DateCountOut(BaseModel):
    date: str
    count: int
