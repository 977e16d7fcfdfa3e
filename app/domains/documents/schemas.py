from pydantic import BaseModel, Field, field_validator

from app.domains.documents.entities import Privacy


class DocumentCreate(BaseModel):
    """Схема для создания документа"""
    name: str = Field(..., min_length=1, max_length=255)
    content: str = Field(default="", max_length=1000000)  # 1MB max content
    privacy: Privacy = Privacy.RESTRICTED
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()
