from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from app.api.http.rendering import render
from app.core.auth import RequestContext, get_request_context
from app.core.errors import BadRequestError
from app.domains.workplace.schemas import MessageCreate
from app.infrastructure.workplace.graph_client import GraphClient, get_graph_client

router = APIRouter(tags=["messages"])


@router.get("/messages")
async def messages_page(
    request: Request,
    context: RequestContext = Depends(get_request_context)
):
    return render(request, "messages.html")


@router.post("/messages")
async def send_message(
    target: str = Form(...),
    message: str = Form(...),
    context: RequestContext = Depends(get_request_context),
    graph_client: GraphClient = Depends(get_graph_client)
):
    """Отправка сообщения в Workplace"""
    try:
        data = MessageCreate(target=target, message=message)
    except ValidationError:
        raise BadRequestError("Both a target and a message are required.")
    
    await graph_client.post_message(data.target, data.message)
    return RedirectResponse("/messages", status_code=status.HTTP_302_FOUND)
