"""
Health check endpoint.

Reports whether the AI gateway key is set and how old the cached knowledge is.
"""

from fastapi import APIRouter, Depends
from typing import Any, Dict
import time
from datetime import datetime, timezone

from app.core.dependencies import get_gateway_client, get_knowledge_service
from app.core.error_handlers import error_handler
from app.config.settings import get_settings
from app.services.ai_gateway_client import AIGatewayClient
from app.services.knowledge_service import KnowledgeBaseService

router = APIRouter(tags=["health"])

# Application start time for uptime calculation
_app_start_time = time.time()


@router.get("/health", summary="Basic health check")
async def health_check(
    gateway: AIGatewayClient = Depends(get_gateway_client),
    knowledge: KnowledgeBaseService = Depends(get_knowledge_service),
) -> Dict[str, Any]:
    settings = get_settings()
    cache_age = knowledge.cache_age_seconds()

    return {
        # Without a gateway key every assistant request fails
        "status": "healthy" if gateway.is_configured else "degraded",
        "version": settings.app_version,
        "environment": settings.environment.value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime_seconds": round(time.time() - _app_start_time, 1),
        "ai_gateway": {
            "configured": gateway.is_configured,
            "model": gateway.model,
        },
        "knowledge_base": {
            "configured": knowledge.settings.is_configured,
            "cache_age_seconds": round(cache_age, 1) if cache_age is not None else None,
            "cache_ttl_seconds": knowledge.cache_ttl,
        },
        "error_statistics": error_handler.get_error_statistics(),
    }
