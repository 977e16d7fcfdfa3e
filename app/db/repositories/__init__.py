from app.db.repositories.user_repository import UserRepository
from app.db.repositories.document_repository import DocumentRepository
from app.db.repositories.community_repository import CommunityRepository

__all__ = [
    "UserRepository",
    "DocumentRepository",
    "CommunityRepository",
]
