"""Иерархия ошибок приложения.

Ошибки уровня запроса (400/403/404) отображаются страницей error.html
с соответствующим статусом. UpstreamError и все прочие исключения
уходят в общий обработчик и превращаются в страницу 500.
"""
from typing import Optional


class AppError(Exception):
    """Базовое исключение приложения"""

    http_status = 500
    header = "Something went wrong"

    def __init__(self, message: str, header: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if header is not None:
            self.header = header

    def to_context(self) -> dict:
        return {"header": self.header, "message": self.message}


class BadRequestError(AppError):
    http_status = 400
    header = "Bad request"


class ForbiddenError(AppError):
    http_status = 403
    header = "Forbidden"


class NotFoundError(AppError):
    http_status = 404
    header = "Not found"


class AuthenticationRequired(AppError):
    """Пользователь не вошел в систему, перенаправляем на /login"""

    http_status = 401
    header = "Authentication required"

    def __init__(self, message: str = "Please log in to continue."):
        super().__init__(message)


class UpstreamError(AppError):
    """Ошибка внешнего сервиса (Graph API). Локально не обрабатывается."""

    header = "Upstream failure"

    def __init__(self, message: str, service: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.service = service
        self.status_code = status_code
