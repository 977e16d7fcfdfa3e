from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.http.rendering import render
from app.core.auth import ACCESS_TOKEN_SESSION_KEY
from app.core.db import get_db
from app.domains.identity.schemas import UserCreate, UserLogin
from app.domains.identity.services import IdentityService
from app.domains.workplace.services import SIGNED_REQUEST_SESSION_KEY

router = APIRouter(tags=["authentication"])


@router.get("/")
async def root(request: Request):
    """Корневая страница"""
    if request.session.get(ACCESS_TOKEN_SESSION_KEY):
        return RedirectResponse("/documents", status_code=status.HTTP_302_FOUND)
    return RedirectResponse("/login", status_code=status.HTTP_302_FOUND)


@router.get("/login")
async def login_page(request: Request):
    return render(request, "login.html", with_navigation=False)


@router.post("/login")
async def login(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    db: AsyncSession = Depends(get_db)
):
    """Вход пользователя"""
    identity_service = IdentityService(db)
    
    token = await identity_service.login_user(UserLogin(email=email, password=password))
    
    if not token:
        return render(
            request,
            "login.html",
            {"error": "Incorrect email or password", "email": email},
            status_code=status.HTTP_401_UNAUTHORIZED,
            with_navigation=False,
        )
    
    request.session[ACCESS_TOKEN_SESSION_KEY] = token
    # Если пользователь пришел по ссылке привязки, возвращаем его к подтверждению
    if request.session.get(SIGNED_REQUEST_SESSION_KEY):
        return RedirectResponse("/link_account_confirm", status_code=status.HTTP_302_FOUND)
    return RedirectResponse("/documents", status_code=status.HTTP_302_FOUND)


@router.get("/register")
async def register_page(request: Request):
    return render(request, "register.html", with_navigation=False)


@router.post("/register")
async def register(
    request: Request,
    email: str = Form(...),
    username: str = Form(...),
    password: str = Form(...),
    db: AsyncSession = Depends(get_db)
):
    """Регистрация нового пользователя"""
    identity_service = IdentityService(db)
    
    try:
        user_data = UserCreate(email=email, username=username, password=password)
        await identity_service.register_user(user_data)
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        return render(
            request,
            "register.html",
            {"error": errors, "email": email, "username": username},
            status_code=status.HTTP_400_BAD_REQUEST,
            with_navigation=False,
        )
    except ValueError as e:
        return render(
            request,
            "register.html",
            {"error": str(e), "email": email, "username": username},
            status_code=status.HTTP_400_BAD_REQUEST,
            with_navigation=False,
        )
    
    return RedirectResponse("/login", status_code=status.HTTP_302_FOUND)


@router.get("/logout")
async def logout(request: Request):
    """Выход пользователя"""
    request.session.pop(ACCESS_TOKEN_SESSION_KEY, None)
    return RedirectResponse("/", status_code=status.HTTP_302_FOUND)
