from dataclasses import dataclass
from typing import Any, MutableMapping

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.errors import AuthenticationRequired
from app.core.security import extract_token_from_header
from app.domains.identity.entities import User
from app.domains.identity.services import IdentityService

ACCESS_TOKEN_SESSION_KEY = "access_token"


@dataclass
class RequestContext:
    """Текущий пользователь и сессия, передаются обработчикам явно"""
    current_user: User
    session: MutableMapping[str, Any]


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)) -> User:
    """Зависимость для получения текущего пользователя.

    Токен берется из сессии, а если его там нет, из заголовка Authorization.
    """
    token = request.session.get(ACCESS_TOKEN_SESSION_KEY) or extract_token_from_header(
        request.headers.get("Authorization")
    )
    if not token:
        raise AuthenticationRequired()

    user = await IdentityService(db).get_current_user_from_token(token)
    if not user:
        request.session.pop(ACCESS_TOKEN_SESSION_KEY, None)
        raise AuthenticationRequired()

    return user


async def get_request_context(
    request: Request,
    current_user: User = Depends(get_current_user),
) -> RequestContext:
    return RequestContext(current_user=current_user, session=request.session)
