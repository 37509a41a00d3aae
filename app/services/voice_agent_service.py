"""
Voice agent orchestration.

The model answers through a forced ``detect_language`` function call so the
reply text and the language it was written in come back together.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from app.core.exceptions import (
    AIGatewayError,
    AssistantException,
    GatewayRateLimitError,
    MessageRequiredError,
)
from app.schemas.chat import AssistantReply, ChatTurn
from app.services.ai_gateway_client import (
    AIGatewayClient,
    extract_message_content,
    extract_tool_arguments,
)
from app.services.lang_detect import LanguageDetector
from app.services.language_profiles import get_language_profile
from app.services.prompts import build_voice_system_prompt

logger = logging.getLogger(__name__)

NO_REPLY = "I apologize, but I could not process your request."
ERROR_REPLY = "I apologize, but I encountered an error. Please try again."
ERROR_LANGUAGE = "English"
RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."

DETECT_LANGUAGE_TOOL: Dict[str, Any] = {
    "type": "function",
    "function": {
        "name": "detect_language",
        "description": "Detect the language of the user message and respond in that language",
        "parameters": {
            "type": "object",
            "properties": {
                "language": {
                    "type": "string",
                    "description": "The detected language of the user message (e.g., English, Hindi, Spanish, French, etc.)",
                },
                "response": {
                    "type": "string",
                    "description": "Your response in the same language as the user message",
                },
            },
            "required": ["language", "response"],
        },
    },
}

DETECT_LANGUAGE_CHOICE: Dict[str, Any] = {
    "type": "function",
    "function": {"name": "detect_language"},
}


def _text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


class VoiceAgentService:
    """Answers voice agent turns with the model-reported language."""

    def __init__(
        self,
        gateway: AIGatewayClient,
        detector: Optional[LanguageDetector] = None,
    ):
        self.gateway = gateway
        self.detector = detector or LanguageDetector()

    def build_messages(
        self, system_prompt: str, history: Sequence[ChatTurn], message: str
    ) -> List[Dict[str, Any]]:
        return [
            {"role": "system", "content": system_prompt},
            *({"role": turn.role, "content": turn.content} for turn in history),
            {"role": "user", "content": message},
        ]

    async def reply(
        self, message: Optional[str], history: Sequence[ChatTurn] = ()
    ) -> AssistantReply:
        if not message or not isinstance(message, str):
            raise MessageRequiredError()

        try:
            return await self._reply(message, history)
        except GatewayRateLimitError as exc:
            raise GatewayRateLimitError(RATE_LIMIT_MESSAGE) from exc
        except AssistantException as exc:
            if exc.status_code != 500:
                # 402 and other upstream statuses surface as a plain 500 here
                exc = AIGatewayError(
                    f"AI gateway error: {exc.status_code}", upstream_status=exc.status_code
                )
            raise exc.with_context(
                language=ERROR_LANGUAGE, fallback_response=ERROR_REPLY
            )

    async def _reply(self, message: str, history: Sequence[ChatTurn]) -> AssistantReply:
        self.gateway.ensure_configured()

        tag = self.detector.detect(message)
        profile = get_language_profile(tag)
        logger.info(f"Voice message language hint: {tag.value}", extra={"language": tag.value})

        messages = self.build_messages(build_voice_system_prompt(tag), history, message)
        data = await self.gateway.create_chat_completion(
            messages,
            tools=[DETECT_LANGUAGE_TOOL],
            tool_choice=DETECT_LANGUAGE_CHOICE,
        )

        response_text: Optional[str] = None
        language: Optional[str] = None
        try:
            arguments = extract_tool_arguments(data)
        except ValueError as e:
            logger.warning(f"Could not parse detect_language arguments: {e}")
            arguments = None

        if arguments:
            response_text = _text_or_none(arguments.get("response"))
            language = _text_or_none(arguments.get("language"))
        else:
            response_text = extract_message_content(data)

        return AssistantReply(
            response=response_text or NO_REPLY,
            language=language or profile.display_name,
        )
