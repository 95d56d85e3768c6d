# app/stores/baby_store.py

from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.baby_model import Baby


class BabyStore:
    """Baby rows, always scoped by the owning user id."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: str, name: str, photo_url: Optional[str] = None) -> Baby:
        baby = Baby(user_id=user_id, name=name, photo_url=photo_url)
        self.db.add(baby)
        self.db.commit()
        self.db.refresh(baby)
        return baby

    def list_for_user(self, user_id: str) -> List[Baby]:
        return (
            self.db.query(Baby)
            .filter(Baby.user_id == user_id)
            .order_by(Baby.id.asc())
            .all()
        )

    def get_owned(self, baby_id: int, user_id: str) -> Optional[Baby]:
        return self.db.query(Baby).filter_by(id=baby_id, user_id=user_id).first()

    def update(
        self,
        baby_id: int,
        user_id: str,
        name: str,
        photo_url: Optional[str] = None,
    ) -> Optional[Baby]:
        baby = self.get_owned(baby_id, user_id)
        if not baby:
            return None

        baby.name = name
        baby.photo_url = photo_url or baby.photo_url

        self.db.commit()
        self.db.refresh(baby)
        return baby

    def delete(self, baby_id: int, user_id: str) -> bool:
        baby = self.get_owned(baby_id, user_id)
        if not baby:
            return False

        # words go with it (ORM cascade + ON DELETE CASCADE)
        self.db.delete(baby)
        self.db.commit()
        return True
