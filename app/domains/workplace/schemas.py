from pydantic import BaseModel, Field, field_validator


class SignedRequest(BaseModel):
    """Данные проверенного signed_request, сохраняемые в сессии"""
    community_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    redirect: str = ""

    @field_validator("community_id", "user_id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        # Workplace присылает идентификаторы и строками, и числами
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class MessageCreate(BaseModel):
    """Схема для отправки сообщения"""
    target: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1, max_length=10000)

    @field_validator("target")
    @classmethod
    def validate_target(cls, v):
        if not v.strip():
            raise ValueError("Target cannot be empty")
        return v.strip()
