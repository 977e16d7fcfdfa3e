"""Привязка локального аккаунта к аккаунту Workplace.

Signed request приходит от Workplace, проверяется и кладется в сессию
под ключом SIGNED_REQUEST_SESSION_KEY. Страница подтверждения читает его,
POST подтверждения записывает workplace_id пользователю и только после
успешной записи удаляет signed request из сессии.
"""
import asyncio
import logging
from typing import Any, MutableMapping, Optional, Tuple

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import RequestContext
from app.core.errors import BadRequestError
from app.core.security import decode_signed_request
from app.db.repositories.community_repository import CommunityRepository
from app.db.repositories.user_repository import UserRepository
from app.domains.identity.entities import User
from app.domains.workplace.entities import Community
from app.domains.workplace.schemas import SignedRequest

logger = logging.getLogger(__name__)

SIGNED_REQUEST_SESSION_KEY = "signedRequest"


def parse_signed_request(raw: str, app_secret: str) -> SignedRequest:
    """Проверка подписи и разбор signed_request"""
    payload = decode_signed_request(raw, app_secret)
    if payload is None:
        raise BadRequestError("Invalid signed request.")

    try:
        return SignedRequest.model_validate(payload)
    except ValidationError:
        raise BadRequestError("Invalid signed request.")


def store_signed_request(session: MutableMapping[str, Any], signed_request: SignedRequest) -> None:
    session[SIGNED_REQUEST_SESSION_KEY] = signed_request.model_dump()


def load_signed_request(session: MutableMapping[str, Any]) -> Optional[SignedRequest]:
    data = session.get(SIGNED_REQUEST_SESSION_KEY)
    if not data:
        return None
    try:
        return SignedRequest.model_validate(data)
    except ValidationError:
        logger.warning("Discarding malformed signed request stored in session")
        session.pop(SIGNED_REQUEST_SESSION_KEY, None)
        return None


class AccountLinkService:
    """Сервис подтверждения привязки аккаунта Workplace"""

    def __init__(self, session: AsyncSession, session_factory):
        self.session = session
        # Для параллельных чтений: AsyncSession нельзя использовать конкурентно
        self.session_factory = session_factory
        self.user_repository = UserRepository(session)

    async def _find_community(self, community_id: str) -> Optional[Community]:
        async with self.session_factory() as session:
            return await CommunityRepository(session).get_by_id(community_id)

    async def _find_linked_user(self, workplace_id: str) -> Optional[User]:
        async with self.session_factory() as session:
            return await UserRepository(session).get_by_workplace_id(workplace_id)

    async def load_link_targets(self, signed_request: SignedRequest) -> Tuple[Optional[Community], Optional[User]]:
        """Сообщество и уже привязанный пользователь, оба запроса параллельно"""
        community, linked_user = await asyncio.gather(
            self._find_community(signed_request.community_id),
            self._find_linked_user(signed_request.user_id),
        )
        return community, linked_user

    def _require_signed_request(self, context: RequestContext) -> SignedRequest:
        signed_request = load_signed_request(context.session)
        if signed_request is None:
            raise BadRequestError("No saved signed request.")
        return signed_request

    @staticmethod
    def _require_community(community: Optional[Community], signed_request: SignedRequest) -> Community:
        if community is None:
            raise BadRequestError(f"No community with id {signed_request.community_id} found")
        return community

    async def confirmation(self, context: RequestContext) -> Community:
        """Проверки перед показом страницы подтверждения"""
        signed_request = self._require_signed_request(context)
        community, linked_user = await self.load_link_targets(signed_request)
        community = self._require_community(community, signed_request)

        if linked_user is not None and linked_user.id != context.current_user.id:
            raise BadRequestError("This user is already linked to somebody else.")

        return community

    async def confirm(self, context: RequestContext) -> str:
        """Привязка аккаунта. Возвращает адрес для перехода после успеха."""
        signed_request = self._require_signed_request(context)
        community, linked_user = await self.load_link_targets(signed_request)
        community = self._require_community(community, signed_request)

        # Конфликт привязки здесь не блокирует запись, только логируется
        if linked_user is not None and linked_user.id != context.current_user.id:
            logger.warning(
                f"Workplace identity {signed_request.user_id} is already linked to user "
                f"{linked_user.id}, relinking to user {context.current_user.id}",
                extra={"user_id": context.current_user.id, "community_id": community.id},
            )

        user = context.current_user
        user.link_workplace(signed_request.user_id)
        await self.user_repository.save(user)

        # Одноразовый токен удаляется только после успешной записи
        context.session.pop(SIGNED_REQUEST_SESSION_KEY, None)
        logger.info(
            f"User {user.id} linked to Workplace community {community.id}",
            extra={"user_id": user.id, "community_id": community.id},
        )
        return signed_request.redirect
