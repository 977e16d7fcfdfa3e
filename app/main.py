import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.http import (
    health_router, auth_router, documents_router, messages_router, link_account_router
)
from app.core.config import settings
from app.core.db import init_models
from app.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    await init_models()
    logger.info("Application started")
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Workplace Docs",
    description="Документы, сообщения и привязка аккаунтов Workplace",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # В продакшене указать конкретные домены
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# Сессия в подписанной cookie: токен доступа и signed request
app.add_middleware(SessionMiddleware, secret_key=settings.session_secret)

register_error_handlers(app)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(documents_router)
app.include_router(messages_router)
app.include_router(link_account_router)
