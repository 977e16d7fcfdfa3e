from app.domains.documents.entities import Document, DocumentAccess, Privacy
from app.domains.documents.schemas import DocumentCreate
from app.domains.documents.services import DocumentService

__all__ = [
    "Document", "DocumentAccess", "Privacy",
    "DocumentCreate",
    "DocumentService"
]
