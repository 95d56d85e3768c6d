from fastapi import APIRouter, Depends, HTTPException, Query
from app.schemas.word_schema import WordCreate, WordCategoryUpdate, WordRead
from app.stores.baby_store import BabyStore
from app.stores.word_store import WordStore
from app.dependencies.owner import get_baby_store, get_word_store, get_user_id
from datetime import date
from typing import List, Optional
import structlog

router = APIRouter(prefix="/words", tags=["words"])
logger = structlog.get_logger()

@router.post("")
def create_word(
    data: WordCreate,
    babies: BabyStore = Depends(get_baby_store),
    words: WordStore = Depends(get_word_store),
):
    missing = [
        name
        for name, value in (
            ("word", data.word),
            ("date", data.date),
            ("babyId", data.baby_id),
            ("userId", data.user_id),
        )
        if not value
    ]
    if missing:
        raise HTTPException(status_code=400, detail=f"Missing required fields: {', '.join(missing)}")

    # a word can only be attached to a baby owned by the same user
    baby = babies.get_owned(data.baby_id, data.user_id)
    if not baby:
        logger.warning("word_access_denied", baby_id=data.baby_id, user_id=data.user_id)
        raise HTTPException(status_code=403, detail="Unauthorized access")

    entry = words.create(baby, word=data.word, word_date=data.date, category=data.category or None)
    logger.info("word_created", word_id=entry.id, baby_id=baby.id)

    return {"id": entry.id}

@router.get("/{baby_id}", response_model=List[WordRead])
def list_words(
    baby_id: int,
    start: Optional[date] = Query(None, alias="from"),
    end: Optional[date] = Query(None, alias="to"),
    category: Optional[str] = Query(None),
    user_id: str = Depends(get_user_id),
    babies: BabyStore = Depends(get_baby_store),
    words: WordStore = Depends(get_word_store),
):
    if not babies.get_owned(baby_id, user_id):
        logger.warning("word_access_denied", baby_id=baby_id, user_id=user_id)
        raise HTTPException(status_code=403, detail="Unauthorized access")

    return words.list_for_baby(baby_id, start=start, end=end, category=category)

# PATCH: only the category of a word can change
@router.patch("/{word_id}")
def update_word_category(
    word_id: int,
    data: WordCategoryUpdate,
    user_id: str = Depends(get_user_id),
    words: WordStore = Depends(get_word_store),
):
    entry = words.update_category(word_id, user_id, data.category or None)
    if not entry:
        raise HTTPException(status_code=404, detail="Word not found")

    return {"message": "Category updated"}

@router.delete("/{word_id}")
def delete_word(
    word_id: int,
    user_id: str = Depends(get_user_id),
    words: WordStore = Depends(get_word_store),
):
    if not words.delete(word_id, user_id):
        logger.warning("word_access_denied", word_id=word_id, user_id=user_id)
        raise HTTPException(status_code=403, detail="Unauthorized")

    return {"message": "Word deleted"}
