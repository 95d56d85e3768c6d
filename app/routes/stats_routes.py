from fastapi import APIRouter, Depends, HTTPException, Query
from dataclasses import asdict
from datetime import date
from typing import List, Optional
import structlog

from app.schemas.stats_schema import StatsSummaryResponse, DateCountOut
from app.stores.baby_store import BabyStore
from app.stores.word_store import WordStore
from app.dependencies.owner import get_baby_store, get_word_store
from app.utils.word_stats import CATEGORY_LABELS, count_by_date, summarize_words

router = APIRouter(prefix="/stats", tags=["stats"])
logger = structlog.get_logger()


def _check_owner(babies: BabyStore, baby_id: Optional[int], user_id: Optional[str]) -> int:
    if not baby_id or not user_id:
        raise HTTPException(status_code=400, detail="babyId and userId are required")

    if not babies.get_owned(baby_id, user_id):
        logger.warning("stats_access_denied", baby_id=baby_id, user_id=user_id)
        raise HTTPException(status_code=403, detail="Unauthorized access")
    return baby_id


@router.get("/summary", response_model=StatsSummaryResponse)
def stats_summary(
    baby_id: Optional[int] = Query(None, alias="babyId"),
    user_id: Optional[str] = Query(None, alias="userId"),
    babies: BabyStore = Depends(get_baby_store),
    words: WordStore = Depends(get_word_store),
):
    """
    Counts for today, yesterday, this week (since Sunday), last week and
    overall, plus the three most used categories with their display labels.
    """
    baby_id = _check_owner(babies, baby_id, user_id)

    records = words.records_for_baby(baby_id)
    summary = summarize_words(records, CATEGORY_LABELS)
    return asdict(summary)


@router.get("/daily", response_model=List[DateCountOut])
def stats_daily(
    baby_id: Optional[int] = Query(None, alias="babyId"),
    user_id: Optional[str] = Query(None, alias="userId"),
    start: Optional[date] = Query(None, alias="from"),
    end: Optional[date] = Query(None, alias="to"),
    category: Optional[str] = Query(None),
    babies: BabyStore = Depends(get_baby_store),
    words: WordStore = Depends(get_word_store),
):
    """
    Number of words per day, optionally limited to a date range and/or a
    category. Days without words are not listed.
    """
    baby_id = _check_owner(babies, baby_id, user_id)

    records = words.records_for_baby(baby_id, start=start, end=end, category=category)
    return [asdict(row) for row in count_by_date(records)]
