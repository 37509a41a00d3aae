"""Voice agent endpoint."""
from fastapi import APIRouter, Depends

from app.core.dependencies import get_voice_agent_service
from app.schemas.chat import AssistantReply, ErrorResponse, VoiceAgentRequest
from app.services.voice_agent_service import VoiceAgentService

router = APIRouter(tags=["voice"])


@router.post(
    "/voice-agent",
    response_model=AssistantReply,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Answer a voice agent turn",
)
async def voice_agent(
    body: VoiceAgentRequest,
    voice_service: VoiceAgentService = Depends(get_voice_agent_service),
) -> AssistantReply:
    return await voice_service.reply(body.message, body.conversation_history)
