from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from app.db.models.document import Document as DocumentModel
from app.db.models.user import User as UserModel

if TYPE_CHECKING:
    from app.domains.documents.entities import Document
    from app.domains.identity.entities import User


class DocumentRepository:
    """Репозиторий для работы с документами"""
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    async def create(self, document: "Document") -> "Document":
        """Создание нового документа"""
        db_document = DocumentModel(
            name=document.name,
            content=document.content,
            privacy=document.privacy,
            owner_id=document.owner_id
        )
        
        self.session.add(db_document)
        try:
            await self.session.commit()
            await self.session.refresh(db_document)
            return self._to_domain(db_document)
        except IntegrityError:
            await self.session.rollback()
            raise ValueError("Invalid owner_id")
    
    async def get_with_owner(self, document_id: int) -> Optional["Document"]:
        """Получение документа вместе с владельцем"""
        result = await self.session.execute(
            select(DocumentModel)
            .options(selectinload(DocumentModel.owner))
            .where(DocumentModel.id == document_id)
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document, db_document.owner) if db_document else None
    
    async def list_visible(self, user_id: int) -> List["Document"]:
        """Документы пользователя и все публичные, новые сверху"""
        result = await self.session.execute(
            select(DocumentModel)
            .options(selectinload(DocumentModel.owner))
            .where(
                or_(
                    DocumentModel.owner_id == user_id,
                    DocumentModel.privacy == "public"
                )
            )
            .order_by(DocumentModel.updated_at.desc(), DocumentModel.id.desc())
        )
        db_documents = result.scalars().all()
        return [self._to_domain(doc, doc.owner) for doc in db_documents]
    
    def _to_domain(self, db_document: DocumentModel, db_owner: Optional[UserModel] = None) -> "Document":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.documents.entities import Document
        
        return Document(
            id=db_document.id,
            name=db_document.name,
            content=db_document.content,
            privacy=db_document.privacy,
            owner_id=db_document.owner_id,
            owner=self._owner_to_domain(db_owner) if db_owner is not None else None,
            created_at=db_document.created_at,
            updated_at=db_document.updated_at
        )
    
    def _owner_to_domain(self, db_owner: UserModel) -> "User":
        from app.db.repositories.user_repository import UserRepository
        
        return UserRepository(self.session)._to_domain(db_owner)
