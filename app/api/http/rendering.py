from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

NAVIGATION = [
    {"name": "Documents", "path": "/documents"},
    {"name": "Messages", "path": "/messages"},
]


def render(request: Request, name: str, context: Optional[dict] = None, status_code: int = 200, with_navigation: bool = True):
    """Рендер шаблона с общей навигацией"""
    ctx = {"navigation": NAVIGATION if with_navigation else []}
    ctx.update(context or {})
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)
