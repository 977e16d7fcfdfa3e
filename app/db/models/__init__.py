from app.db.models.user import User
from app.db.models.document import Document
from app.db.models.community import Community

__all__ = [
    "User",
    "Document",
    "Community",
]
