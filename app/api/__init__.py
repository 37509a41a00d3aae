# API endpoints and routers

from .chat_endpoints import router as chat_router
from .voice_endpoints import router as voice_router
from .health_endpoints import router as health_router

__all__ = [
    "chat_router",
    "voice_router",
    "health_router",
]
