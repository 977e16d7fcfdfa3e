from app.domains.workplace.entities import Community
from app.domains.workplace.schemas import SignedRequest, MessageCreate

__all__ = [
    "Community",
    "SignedRequest", "MessageCreate",
]
