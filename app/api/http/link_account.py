from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.http.rendering import render
from app.core.auth import RequestContext, get_request_context
from app.core.config import settings
from app.core.db import get_db, get_session_factory
from app.domains.workplace.services import (
    AccountLinkService, parse_signed_request, store_signed_request
)

router = APIRouter(tags=["workplace"])


def get_account_link_service(
    db: AsyncSession = Depends(get_db),
    session_factory=Depends(get_session_factory)
) -> AccountLinkService:
    return AccountLinkService(db, session_factory)


@router.get("/link_account")
async def link_account(request: Request, signed_request: str = Query(...)):
    """Прием signed_request от Workplace"""
    data = parse_signed_request(signed_request, settings.workplace_app_secret)
    store_signed_request(request.session, data)
    return RedirectResponse("/link_account_confirm", status_code=status.HTTP_302_FOUND)


@router.get("/link_account_confirm")
async def link_account_confirm_page(
    request: Request,
    context: RequestContext = Depends(get_request_context),
    service: AccountLinkService = Depends(get_account_link_service)
):
    """Страница подтверждения привязки аккаунта"""
    community = await service.confirmation(context)
    return render(request, "link_account.html", {"community": community})


@router.post("/link_account_confirm")
async def link_account_confirm(
    request: Request,
    context: RequestContext = Depends(get_request_context),
    service: AccountLinkService = Depends(get_account_link_service)
):
    """Подтверждение привязки аккаунта"""
    redirect = await service.confirm(context)
    return render(request, "link_success.html", {"redirect": redirect})
