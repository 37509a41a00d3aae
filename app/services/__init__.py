# Business logic services

from .lang_detect import LanguageDetector, LanguageTag, detect_language
from .language_profiles import LanguageProfile, get_language_profile
from .knowledge_service import KnowledgeBaseService, KnowledgeSection
from .ai_gateway_client import AIGatewayClient
from .chat_service import ChatService
from .voice_agent_service import VoiceAgentService

__all__ = [
    "LanguageDetector",
    "LanguageTag",
    "detect_language",
    "LanguageProfile",
    "get_language_profile",
    "KnowledgeBaseService",
    "KnowledgeSection",
    "AIGatewayClient",
    "ChatService",
    "VoiceAgentService",
]
