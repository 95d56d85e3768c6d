# app/models/word_model.py
from sqlalchemy import Column, Integer, String, Date, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from config.database import Base

class WordEntry(Base):
    __tablename__ = "words"

    id = Column(Integer, primary_key=True, index=True)
    baby_id = Column(Integer, ForeignKey("baby.id", ondelete="CASCADE"), nullable=False, index=True)
    word = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    category = Column(String(50), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    baby = relationship("Baby", back_populates="words")

    @property
    def user_id(self) -> str:
        # the owner always comes from the baby, never stored twice
        return self.baby.user_id
