"""
Shared fixtures: settings objects and httpx clients backed by MockTransport.
"""

import json

import httpx
import pytest

from app.config.settings import AIGatewaySettings, KnowledgeSettings
from app.services.ai_gateway_client import AIGatewayClient
from app.services.knowledge_service import KnowledgeBaseService


class FakeClock:
    """Monotonic clock the tests advance by hand."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def gateway_settings():
    return AIGatewaySettings(
        api_key="test-key",
        base_url="https://gateway.test/v1",
        model="google/gemini-2.5-flash",
    )


@pytest.fixture
def unconfigured_gateway_settings():
    return AIGatewaySettings(api_key=None, base_url="https://gateway.test/v1")


@pytest.fixture
def knowledge_settings():
    return KnowledgeSettings(
        supabase_url="https://project.supabase.test",
        service_role_key="service-key",
        table="ai_knowledge",
        cache_ttl_seconds=300,
    )


@pytest.fixture
def unconfigured_knowledge_settings():
    return KnowledgeSettings(supabase_url=None, service_role_key=None)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def completion():
    """Build an OpenAI-style chat completion body."""

    def _build(content=None, tool_arguments=None):
        message = {"role": "assistant", "content": content}
        if tool_arguments is not None:
            if not isinstance(tool_arguments, str):
                tool_arguments = json.dumps(tool_arguments, ensure_ascii=False)
            message["tool_calls"] = [
                {
                    "id": "call_1",
                    "type": "function",
                    "function": {"name": "detect_language", "arguments": tool_arguments},
                }
            ]
        return {"choices": [{"index": 0, "message": message}]}

    return _build


@pytest.fixture
def gateway_factory(gateway_settings):
    """
    Build an AIGatewayClient whose requests go to ``handler``.

    Every request is appended to the returned ``sent`` list.
    """

    def _build(handler, settings=None):
        sent = []

        def _record(request: httpx.Request):
            sent.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        return AIGatewayClient(settings or gateway_settings, http_client=client), sent

    return _build


@pytest.fixture
def fallback_knowledge(unconfigured_knowledge_settings):
    return KnowledgeBaseService(unconfigured_knowledge_settings)
