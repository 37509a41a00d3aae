"""
Dependency injection setup for FastAPI.
Provides dependency providers for the assistant services with lifecycle management.
"""

from fastapi import Depends, Request, HTTPException
from typing import Optional
import logging
import asyncio

from app.config.settings import Settings, get_settings
from app.services.ai_gateway_client import AIGatewayClient
from app.services.chat_service import ChatService
from app.services.knowledge_service import KnowledgeBaseService
from app.services.lang_detect import LanguageDetector
from app.services.voice_agent_service import VoiceAgentService


logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container owning the long-lived services and their HTTP clients.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._gateway_client: Optional[AIGatewayClient] = None
        self._knowledge_service: Optional[KnowledgeBaseService] = None
        self._chat_service: Optional[ChatService] = None
        self._voice_agent_service: Optional[VoiceAgentService] = None
        self._initialized = False
        self._initialization_lock = asyncio.Lock()

    async def initialize_services(self) -> None:
        """
        Build services in dependency order. Safe to call more than once.
        """
        async with self._initialization_lock:
            if self._initialized:
                return

            logger.info("Initializing service container")
            settings = self._settings or get_settings()

            try:
                detector = LanguageDetector()
                self._gateway_client = AIGatewayClient(settings.ai_gateway)
                self._knowledge_service = KnowledgeBaseService(settings.knowledge)
                self._chat_service = ChatService(
                    gateway=self._gateway_client,
                    knowledge=self._knowledge_service,
                    detector=detector,
                    history_window=settings.chat_history_window,
                    max_tokens=settings.ai_gateway.chat_max_tokens,
                    temperature=settings.ai_gateway.chat_temperature,
                )
                self._voice_agent_service = VoiceAgentService(
                    gateway=self._gateway_client,
                    detector=detector,
                )

                if not self._gateway_client.is_configured:
                    logger.warning("AI gateway API key is not set; assistant endpoints will fail")

                self._initialized = True
                logger.info("Service container initialization completed")

            except Exception as e:
                logger.error(f"Service container initialization failed: {e}", exc_info=True)
                raise

    async def cleanup_services(self) -> None:
        """
        Close HTTP clients and drop service references.
        """
        logger.info("Cleaning up service container")

        try:
            if self._knowledge_service:
                await self._knowledge_service.close()
            if self._gateway_client:
                await self._gateway_client.close()

            self._voice_agent_service = None
            self._chat_service = None
            self._knowledge_service = None
            self._gateway_client = None

            logger.info("Service container cleanup completed")

        except Exception as e:
            logger.error(f"Service container cleanup failed: {e}", exc_info=True)
        finally:
            self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def get_gateway_client(self) -> AIGatewayClient:
        if not self._initialized or self._gateway_client is None:
            raise RuntimeError("Service container not initialized")
        return self._gateway_client

    def get_knowledge_service(self) -> KnowledgeBaseService:
        if not self._initialized or self._knowledge_service is None:
            raise RuntimeError("Service container not initialized")
        return self._knowledge_service

    def get_chat_service(self) -> ChatService:
        if not self._initialized or self._chat_service is None:
            raise RuntimeError("Service container not initialized")
        return self._chat_service

    def get_voice_agent_service(self) -> VoiceAgentService:
        if not self._initialized or self._voice_agent_service is None:
            raise RuntimeError("Service container not initialized")
        return self._voice_agent_service


# Global service container
service_container = ServiceContainer()


def get_service_container(request: Request) -> ServiceContainer:
    """
    Get the service container from application state.

    Raises:
        HTTPException: If service container is not available
    """
    if not hasattr(request.app.state, 'service_container'):
        logger.error("Service container not initialized")
        raise HTTPException(
            status_code=500,
            detail="Service container not available"
        )

    return request.app.state.service_container


def get_chat_service(
    container: ServiceContainer = Depends(get_service_container)
) -> ChatService:
    try:
        return container.get_chat_service()
    except RuntimeError as e:
        logger.error(f"Chat service not available: {e}")
        raise HTTPException(status_code=500, detail="Chat service not available")


def get_voice_agent_service(
    container: ServiceContainer = Depends(get_service_container)
) -> VoiceAgentService:
    try:
        return container.get_voice_agent_service()
    except RuntimeError as e:
        logger.error(f"Voice agent service not available: {e}")
        raise HTTPException(status_code=500, detail="Voice agent service not available")


def get_knowledge_service(
    container: ServiceContainer = Depends(get_service_container)
) -> KnowledgeBaseService:
    try:
        return container.get_knowledge_service()
    except RuntimeError as e:
        logger.error(f"Knowledge service not available: {e}")
        raise HTTPException(status_code=500, detail="Knowledge service not available")


def get_gateway_client(
    container: ServiceContainer = Depends(get_service_container)
) -> AIGatewayClient:
    try:
        return container.get_gateway_client()
    except RuntimeError as e:
        logger.error(f"AI gateway client not available: {e}")
        raise HTTPException(status_code=500, detail="AI gateway client not available")
