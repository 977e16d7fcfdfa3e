from datetime import datetime
from typing import Optional


class Community:
    """Сообщество Workplace, в котором установлено приложение"""

    def __init__(self, id: str, name: str = "", created_at: Optional[datetime] = None):
        self.id = id
        self.name = name
        self.created_at = created_at or datetime.utcnow()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Community):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Community(id={self.id}, name={self.name})"
