from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from config.database import Base

class Baby(Base):
    __tablename__ = "baby"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)  # opaque id supplied by the client
    name = Column(String, nullable=False)
    photo_url = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    words = relationship(
        "WordEntry",
        back_populates="baby",
        cascade="all, delete",
        passive_deletes=True,
    )
