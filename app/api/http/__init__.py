from app.api.http.health import router as health_router
from app.api.http.auth import router as auth_router
from app.api.http.documents import router as documents_router
from app.api.http.messages import router as messages_router
from app.api.http.link_account import router as link_account_router

__all__ = [
    "health_router",
    "auth_router",
    "documents_router",
    "messages_router",
    "link_account_router"
]
