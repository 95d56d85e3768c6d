from typing import Optional

from fastapi import Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.stores.baby_store import BabyStore
from app.stores.word_store import WordStore
from config.database import get_db


# The caller's user id is an opaque string and is not verified.
def get_user_id(user_id: Optional[str] = Query(None, alias="userId")) -> str:
    if not user_id:
        raise HTTPException(status_code=400, detail="userId is required")
    return user_id


def get_baby_store(db: Session = Depends(get_db)) -> BabyStore:
    return BabyStore(db)


def get_word_store(db: Session = Depends(get_db)) -> WordStore:
    return WordStore(db)
