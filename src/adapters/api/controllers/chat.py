from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.adapters.api.dependencies import get_chat_service
from src.adapters.api.schemas.chat import (
    ChatErrorSchema,
    ChatRequestSchema,
    ChatResponseSchema,
)
from src.app.services.chat_service import ChatService
from src.domain.exceptions import ChatError

router = APIRouter(tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatResponseSchema,
    responses={
        402: {"model": ChatErrorSchema},
        429: {"model": ChatErrorSchema},
        500: {"model": ChatErrorSchema},
    },
)
async def chat(
    req: ChatRequestSchema,
    service: ChatService = Depends(get_chat_service),
):
    try:
        reply = await service.ask(req.message)
    except ChatError as exc:
        return JSONResponse(
            status_code=exc.status_code, content={"error": exc.message}
        )

    return ChatResponseSchema(
        answer=reply.answer,
        youtube_links=list(reply.youtube_links),
        search_query=reply.search_query,
    )
