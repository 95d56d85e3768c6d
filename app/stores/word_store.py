# app/stores/word_store.py

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.baby_model import Baby
from app.models.word_model import WordEntry
from app.utils.word_stats import WordRecord


class WordStore:
    """
    Word rows. Ownership is checked through the parent baby, so a word can
    never belong to a different user than its baby.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        baby: Baby,
        word: str,
        word_date: date,
        category: Optional[str] = None,
    ) -> WordEntry:
        entry = WordEntry(baby_id=baby.id, word=word, date=word_date, category=category)
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def list_for_baby(
        self,
        baby_id: int,
        start: Optional[date] = None,
        end: Optional[date] = None,
        category: Optional[str] = None,
    ) -> List[WordEntry]:
        query = self.db.query(WordEntry).filter(WordEntry.baby_id == baby_id)
        if start:
            query = query.filter(WordEntry.date >= start)
        if end:
            query = query.filter(WordEntry.date <= end)
        if category:
            query = query.filter(WordEntry.category == category)
        return query.order_by(WordEntry.date.asc(), WordEntry.id.asc()).all()

    def records_for_baby(
        self,
        baby_id: int,
        start: Optional[date] = None,
        end: Optional[date] = None,
        category: Optional[str] = None,
    ) -> List[WordRecord]:
        return [
            WordRecord(date=w.date.isoformat(), category=w.category)
            for w in self.list_for_baby(baby_id, start=start, end=end, category=category)
        ]

    def get_owned(self, word_id: int, user_id: str) -> Optional[WordEntry]:
        return (
            self.db.query(WordEntry)
            .join(Baby, WordEntry.baby_id == Baby.id)
            .filter(WordEntry.id == word_id, Baby.user_id == user_id)
            .first()
        )

    def update_category(
        self,
        word_id: int,
        user_id: str,
        category: Optional[str],
    ) -> Optional[WordEntry]:
        entry = self.get_owned(word_id, user_id)
        if not entry:
            return None

        entry.category = category
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def delete(self, word_id: int, user_id: str) -> bool:
        entry = self.get_owned(word_id, user_id)
        if not entry:
            return False

        self.db.delete(entry)
        self.db.commit()
        return True
