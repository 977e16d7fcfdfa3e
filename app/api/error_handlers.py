import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.http.rendering import render
from app.core.errors import AppError, AuthenticationRequired, UpstreamError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Регистрация глобальных обработчиков ошибок"""

    @app.exception_handler(AuthenticationRequired)
    async def authentication_required_handler(request: Request, exc: AuthenticationRequired):
        return RedirectResponse("/login", status_code=status.HTTP_302_FOUND)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """NotFound, Forbidden, BadRequest: страница ошибки с нужным статусом"""
        logger.info(
            f"{exc.__class__.__name__} on {request.url.path}: {exc.message}",
            extra={"path": request.url.path, "status_code": exc.http_status},
        )
        return render(request, "error.html", exc.to_context(), status_code=exc.http_status)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Неполная или некорректная форма: 400 вместо JSON ответа 422"""
        fields = ", ".join(str(err["loc"][-1]) for err in exc.errors() if err.get("loc"))
        logger.info(
            f"Invalid request on {request.url.path}: {fields}",
            extra={"path": request.url.path, "status_code": status.HTTP_400_BAD_REQUEST},
        )
        return render(
            request,
            "error.html",
            {
                "header": "Bad request",
                "message": "The submitted form is missing required fields or contains invalid values.",
            },
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    # Ошибки внешних сервисов и БД идут в общий обработчик
    app.add_exception_handler(UpstreamError, unhandled_error_handler)
    app.add_exception_handler(SQLAlchemyError, unhandled_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def unhandled_error_handler(request: Request, exc: Exception):
    """Общий обработчик: логируем с трейсбеком, детали наружу не отдаем"""
    logger.error(
        f"Unhandled error on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"path": request.url.path},
    )
    return render(
        request,
        "error.html",
        {
            "header": "Something went wrong",
            "message": "An unexpected error occurred. Please try again later.",
        },
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
