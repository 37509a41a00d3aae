"""
Knowledge base service for grounding the chat assistant.

Sections are read from a Supabase table over its REST interface and rendered
into markdown. The rendered text is cached in-process for a fixed TTL; when the
table is unreachable or empty the static fallback knowledge is served instead.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

import httpx

from app.config.settings import KnowledgeSettings, get_settings
from app.services.prompts import FALLBACK_KNOWLEDGE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KnowledgeSection:
    section_title: str
    content: str

    def render(self) -> str:
        return f"## {self.section_title}\n{self.content}"


@dataclass
class _CacheEntry:
    value: str
    fetched_at: float


class KnowledgeBaseService:
    """
    Fetches active knowledge sections, ordered by priority, with a TTL cache.

    Concurrent callers that find the cache stale share a single refresh.
    """

    def __init__(
        self,
        knowledge_settings: Optional[KnowledgeSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = knowledge_settings or get_settings().knowledge
        self.cache_ttl = self.settings.cache_ttl_seconds
        self._client = http_client
        self._owns_client = http_client is None
        self._clock = clock
        self._cache: Optional[_CacheEntry] = None
        self._refresh_lock = asyncio.Lock()

        if not self.settings.is_configured:
            logger.warning(
                "Knowledge base not configured, fallback knowledge will be used. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY."
            )

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.settings.timeout_seconds)
        return self._client

    def _get_headers(self) -> dict:
        key = self.settings.service_role_key
        return {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Accept": "application/json",
        }

    def _cached_value(self) -> Optional[str]:
        if self._cache is None:
            return None
        if self._clock() - self._cache.fetched_at < self.cache_ttl:
            return self._cache.value
        return None

    async def get_knowledge(self) -> str:
        """
        Return the rendered knowledge base.

        Returns:
            Markdown sections joined by blank lines, or the fallback knowledge
        """
        cached = self._cached_value()
        if cached is not None:
            logger.debug("Knowledge cache hit")
            return cached

        async with self._refresh_lock:
            # Another request may have refreshed while we waited
            cached = self._cached_value()
            if cached is not None:
                return cached

            sections = await self.fetch_sections()
            if not sections:
                return FALLBACK_KNOWLEDGE

            knowledge = "\n\n".join(section.render() for section in sections)
            self._cache = _CacheEntry(value=knowledge, fetched_at=self._clock())
            logger.info(f"Knowledge base refreshed with {len(sections)} sections")
            return knowledge

    async def fetch_sections(self) -> List[KnowledgeSection]:
        """
        Read active sections from the knowledge table.

        Returns:
            Sections by descending priority; empty list on any failure
        """
        if not self.settings.is_configured:
            return []

        url = f"{self.settings.supabase_url.rstrip('/')}/rest/v1/{self.settings.table}"
        params = {
            "select": "section_title,content",
            "is_active": "eq.true",
            "order": "priority.desc",
        }

        try:
            response = await self._get_client().get(
                url, params=params, headers=self._get_headers()
            )
        except httpx.TimeoutException:
            logger.error("Timeout fetching knowledge base")
            return []
        except httpx.HTTPError as e:
            logger.error(f"Error fetching knowledge: {e}")
            return []

        if response.status_code != 200:
            logger.error(
                f"Knowledge base returned {response.status_code}: {response.text[:200]}"
            )
            return []

        try:
            rows = response.json()
        except ValueError as e:
            logger.error(f"Knowledge base returned invalid JSON: {e}")
            return []

        if not isinstance(rows, list):
            logger.error("Knowledge base returned unexpected payload shape")
            return []

        return [
            KnowledgeSection(
                section_title=str(row.get("section_title") or ""),
                content=str(row.get("content") or ""),
            )
            for row in rows
            if isinstance(row, dict)
        ]

    def invalidate(self) -> None:
        """Drop the cached knowledge so the next call refetches."""
        self._cache = None

    def cache_age_seconds(self) -> Optional[float]:
        if self._cache is None:
            return None
        return self._clock() - self._cache.fetched_at

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
