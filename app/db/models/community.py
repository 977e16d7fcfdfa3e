from datetime import datetime

from sqlalchemy import Column, String, DateTime

from app.db.base import Base


class Community(Base):
    __tablename__ = "communities"

    # Идентификатор сообщества в Workplace
    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False, default="")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
