import enum
from datetime import datetime
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from app.domains.identity.entities import User


class Privacy(str, enum.Enum):
    PUBLIC = "public"
    RESTRICTED = "restricted"


class Document:
    """Сущность документа домена Documents"""
    
    def __init__(
        self,
        id: Optional[int],
        name: str,
        content: str = "",
        privacy: str = Privacy.RESTRICTED.value,
        owner_id: Optional[int] = None,
        owner: Optional["User"] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.name = name
        self.content = content
        self.privacy = privacy
        self.owner_id = owner_id
        self.owner = owner
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()
    
    @classmethod
    def create_document(cls, name: str, owner_id: int, content: str = "", privacy: str = Privacy.RESTRICTED.value) -> "Document":
        """Создание нового документа"""
        return cls(
            id=None,
            name=name,
            content=content,
            privacy=privacy,
            owner_id=owner_id
        )
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.id == other.id
    
    def __repr__(self) -> str:
        return f"Document(id={self.id}, name={self.name}, privacy={self.privacy})"


class DocumentAccess:
    """Проверка доступа к документу.

    Закрыт только документ с privacy == "restricted" для всех, кроме владельца.
    Любое другое значение privacy (включая неизвестные) считается открытым.
    """
    
    def __init__(self, owner_id: int, privacy: str):
        self.owner_id = owner_id
        self.privacy = privacy
    
    def is_owner(self, user_id: int) -> bool:
        """Проверка является ли пользователь владельцем"""
        return user_id == self.owner_id
    
    def can_view(self, user_id: int) -> bool:
        """Проверка доступа пользователя к документу"""
        if self.privacy == Privacy.RESTRICTED.value:
            return self.is_owner(user_id)
        return True
    
    @classmethod
    def for_document(cls, document: Document) -> "DocumentAccess":
        owner_id = document.owner.id if document.owner is not None else document.owner_id
        return cls(owner_id=owner_id, privacy=document.privacy)
