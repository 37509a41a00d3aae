"""Website chat widget endpoint."""
from fastapi import APIRouter, Depends
import logging

from app.core.dependencies import get_chat_service
from app.schemas.chat import AssistantReply, AssistantRequest, ErrorResponse
from app.services.chat_service import ChatService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post(
    "/ai-chat",
    response_model=AssistantReply,
    responses={
        400: {"model": ErrorResponse},
        402: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Answer a chat widget message",
)
async def ai_chat(
    body: AssistantRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> AssistantReply:
    """
    Reply to a visitor message in the visitor's language, grounded in the
    knowledge base. Only the most recent history turns are sent upstream.
    """
    return await chat_service.reply(body.message, body.conversation_history)
