"""
Text chat orchestration: language detection, knowledge grounding and the
gateway call for the website chat widget.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from app.config.settings import get_settings
from app.core.exceptions import AIGatewayError, MessageRequiredError
from app.schemas.chat import AssistantReply, ChatTurn
from app.services.ai_gateway_client import AIGatewayClient, extract_message_content
from app.services.knowledge_service import KnowledgeBaseService
from app.services.lang_detect import LanguageDetector, LanguageTag
from app.services.prompts import build_chat_system_prompt

logger = logging.getLogger(__name__)

EMPTY_REPLY = "I'm sorry, I couldn't process that. Please try again."


class ChatService:
    """Answers chat widget messages in the visitor's language."""

    def __init__(
        self,
        gateway: AIGatewayClient,
        knowledge: KnowledgeBaseService,
        detector: Optional[LanguageDetector] = None,
        history_window: Optional[int] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ):
        settings = get_settings()
        self.gateway = gateway
        self.knowledge = knowledge
        self.detector = detector or LanguageDetector()
        self.history_window = (
            settings.chat_history_window if history_window is None else history_window
        )
        self.max_tokens = max_tokens or settings.ai_gateway.chat_max_tokens
        self.temperature = (
            settings.ai_gateway.chat_temperature if temperature is None else temperature
        )

    def build_messages(
        self, system_prompt: str, history: Sequence[ChatTurn], message: str
    ) -> List[Dict[str, Any]]:
        recent = list(history)[-self.history_window:] if self.history_window else []
        return [
            {"role": "system", "content": system_prompt},
            *({"role": turn.role, "content": turn.content} for turn in recent),
            {"role": "user", "content": message},
        ]

    async def reply(
        self, message: Optional[str], history: Sequence[ChatTurn] = ()
    ) -> AssistantReply:
        """
        Produce the assistant's answer to one chat message.

        Raises:
            MessageRequiredError: No message text
            ConfigurationError: Gateway key missing
            AIGatewayError: Gateway failure; carries the detected language
        """
        if not message or not isinstance(message, str):
            raise MessageRequiredError()

        self.gateway.ensure_configured()

        language: LanguageTag = self.detector.detect(message)
        logger.info(f"Chat message language: {language.value}", extra={"language": language.value})

        knowledge = await self.knowledge.get_knowledge()
        system_prompt = build_chat_system_prompt(knowledge, language)
        messages = self.build_messages(system_prompt, history, message)

        try:
            data = await self.gateway.create_chat_completion(
                messages,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except AIGatewayError as exc:
            if exc.status_code in (402, 429):
                raise exc.with_context(language=language.value)
            raise

        return AssistantReply(
            response=extract_message_content(data) or EMPTY_REPLY,
            language=language.value,
        )
