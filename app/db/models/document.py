from sqlalchemy import Column, String, Text, Integer, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import BaseModel


class Document(BaseModel):
    __tablename__ = "documents"
    
    name = Column(String(255), nullable=False)
    content = Column(Text, default="")
    privacy = Column(String(32), nullable=False, default="restricted")
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    
    # Relationships
    owner = relationship("User", back_populates="owned_documents")
