from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.http.rendering import render
from app.core.auth import RequestContext, get_request_context
from app.core.db import get_db
from app.domains.documents.entities import Privacy
from app.domains.documents.schemas import DocumentCreate
from app.domains.documents.services import DocumentNotFoundError, DocumentService

router = APIRouter(tags=["documents"])


@router.get("/documents")
async def list_documents(
    request: Request,
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_db)
):
    """Список документов пользователя и публичных документов"""
    document_service = DocumentService(db)
    documents = await document_service.list_documents(context.current_user)
    return render(request, "documents.html", {"documents": documents, "user": context.current_user})


@router.get("/document/create")
async def create_document_page(
    request: Request,
    context: RequestContext = Depends(get_request_context)
):
    return render(request, "create_document.html", {"privacy_options": list(Privacy)})


@router.post("/document/create")
async def create_document(
    request: Request,
    name: str = Form(...),
    content: str = Form(""),
    privacy: str = Form(Privacy.RESTRICTED.value),
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_db)
):
    """Создание нового документа"""
    try:
        document_data = DocumentCreate(name=name, content=content, privacy=privacy)
    except ValidationError as e:
        return render(
            request,
            "create_document.html",
            {
                "privacy_options": list(Privacy),
                "error": "; ".join(err["msg"] for err in e.errors()),
                "name": name,
                "content": content,
            },
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    
    document_service = DocumentService(db)
    await document_service.create_document(document_data, context.current_user)
    return RedirectResponse("/documents", status_code=status.HTTP_302_FOUND)


@router.get("/document/{document_id}")
async def view_document(
    request: Request,
    document_id: str,
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_db)
):
    """Просмотр документа"""
    # Документа с нечисловым id не существует
    if not document_id.isdecimal():
        raise DocumentNotFoundError()

    document_service = DocumentService(db)
    document = await document_service.view_document(context.current_user, int(document_id))
    return render(request, "document.html", {"document": document})
