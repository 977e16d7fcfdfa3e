import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ForbiddenError, NotFoundError
from app.db.repositories.document_repository import DocumentRepository
from app.domains.documents.entities import Document, DocumentAccess
from app.domains.documents.schemas import DocumentCreate
from app.domains.identity.entities import User

logger = logging.getLogger(__name__)


class DocumentNotFoundError(NotFoundError):
    def __init__(self):
        super().__init__(
            "The document you requested does not seem to exist.",
            header="Document does not exist",
        )


class DocumentService:
    """Сервис для работы с документами"""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = DocumentRepository(session)
    
    async def list_documents(self, user: User) -> List[Document]:
        """Документы, видимые пользователю: свои и публичные"""
        return await self.document_repository.list_visible(user.id)
    
    async def create_document(self, document_data: DocumentCreate, owner: User) -> Document:
        """Создание нового документа"""
        document = Document.create_document(
            name=document_data.name,
            owner_id=owner.id,
            content=document_data.content,
            privacy=document_data.privacy.value
        )
        
        created_document = await self.document_repository.create(document)
        logger.info(
            f"User {owner.id} created document {created_document.id}",
            extra={"user_id": owner.id, "document_id": created_document.id},
        )
        return created_document
    
    async def view_document(self, user: User, document_id: int) -> Document:
        """Получение документа с проверкой прав доступа"""
        document = await self.document_repository.get_with_owner(document_id)
        
        if not document:
            raise DocumentNotFoundError()

        access = DocumentAccess.for_document(document)
        if not access.can_view(user.id):
            raise ForbiddenError(
                "This document is private.",
                header="Document is private",
            )
        
        return document
