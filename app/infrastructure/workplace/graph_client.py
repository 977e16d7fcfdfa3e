import logging
from typing import Optional

import httpx

from app.core.config import settings
from app.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class GraphClient:
    """Клиент Workplace Graph API для публикации сообщений"""

    def __init__(
        self,
        base_url: str,
        access_token: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self.timeout = httpx.Timeout(timeout, connect=5.0)
        self.transport = transport

    async def post_message(self, target: str, content: str) -> str:
        """Публикация сообщения в группу или ленту target. Возвращает id поста."""
        url = f"{self.base_url}/{target}/feed"
        headers = {"Authorization": f"Bearer {self.access_token}"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, data={"message": content}, headers=headers)
        except httpx.TimeoutException:
            raise UpstreamError("Graph API request timed out", service="graph")
        except httpx.HTTPError as e:
            raise UpstreamError(f"Graph API request failed: {e}", service="graph")

        if response.status_code >= 400:
            raise UpstreamError(
                f"Graph API returned {response.status_code}",
                service="graph",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            data = {}
        post_id = data.get("id", "") if isinstance(data, dict) else ""

        logger.info(f"Posted message to {target}")
        return post_id


def get_graph_client() -> GraphClient:
    return GraphClient(
        base_url=settings.graph_api_url,
        access_token=settings.workplace_access_token,
        timeout=settings.graph_api_timeout,
    )
