from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.models.community import Community as CommunityModel
from app.domains.workplace.entities import Community


class CommunityRepository:
    """Репозиторий для работы с сообществами Workplace"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, community_id: str) -> Optional[Community]:
        """Получение сообщества по идентификатору"""
        result = await self.session.execute(
            select(CommunityModel).where(CommunityModel.id == str(community_id))
        )
        db_community = result.scalar_one_or_none()
        return self._to_domain(db_community) if db_community else None

    def _to_domain(self, db_community: CommunityModel) -> Community:
        """Преобразование модели БД в доменную сущность"""
        return Community(
            id=db_community.id,
            name=db_community.name,
            created_at=db_community.created_at
        )
