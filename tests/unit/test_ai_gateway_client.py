import json

import httpx
import pytest

from app.core.exceptions import (
    AIGatewayError,
    ConfigurationError,
    ErrorCode,
    GatewayPaymentRequiredError,
    GatewayRateLimitError,
)
from app.services.ai_gateway_client import extract_message_content, extract_tool_arguments


@pytest.mark.asyncio
async def test_posts_chat_completion(gateway_factory, completion):
    client, sent = gateway_factory(lambda request: httpx.Response(200, json=completion("Hi!")))

    data = await client.create_chat_completion(
        [{"role": "user", "content": "Hello"}], max_tokens=500, temperature=0.7
    )

    assert extract_message_content(data) == "Hi!"
    request = sent[0]
    assert str(request.url) == "https://gateway.test/v1/chat/completions"
    assert request.headers["authorization"] == "Bearer test-key"
    payload = json.loads(request.content)
    assert payload == {
        "model": "google/gemini-2.5-flash",
        "messages": [{"role": "user", "content": "Hello"}],
        "max_tokens": 500,
        "temperature": 0.7,
    }


@pytest.mark.asyncio
async def test_optional_fields_are_omitted(gateway_factory, completion):
    client, sent = gateway_factory(lambda request: httpx.Response(200, json=completion("ok")))
    await client.create_chat_completion([{"role": "user", "content": "x"}])

    payload = json.loads(sent[0].content)
    assert "max_tokens" not in payload
    assert "temperature" not in payload
    assert "tools" not in payload


@pytest.mark.asyncio
async def test_missing_key_raises_before_request(gateway_factory, unconfigured_gateway_settings):
    client, sent = gateway_factory(
        lambda request: httpx.Response(200, json={}), settings=unconfigured_gateway_settings
    )

    with pytest.raises(ConfigurationError) as exc_info:
        await client.create_chat_completion([{"role": "user", "content": "x"}])

    assert exc_info.value.message == "LOVABLE_API_KEY is not configured"
    assert exc_info.value.status_code == 500
    assert sent == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status,exc_type,status_code,error_code",
    [
        (429, GatewayRateLimitError, 429, ErrorCode.RATE_LIMIT_EXCEEDED),
        (402, GatewayPaymentRequiredError, 402, ErrorCode.PAYMENT_REQUIRED),
        (500, AIGatewayError, 500, ErrorCode.AI_GATEWAY_ERROR),
        (400, AIGatewayError, 500, ErrorCode.AI_GATEWAY_ERROR),
    ],
)
async def test_upstream_status_mapping(gateway_factory, status, exc_type, status_code, error_code):
    client, _ = gateway_factory(lambda request: httpx.Response(status, text="upstream says no"))

    with pytest.raises(exc_type) as exc_info:
        await client.create_chat_completion([{"role": "user", "content": "x"}])

    assert exc_info.value.status_code == status_code
    assert exc_info.value.error_code == error_code
    assert exc_info.value.upstream_status == status


@pytest.mark.asyncio
async def test_rate_limit_message(gateway_factory):
    client, _ = gateway_factory(lambda request: httpx.Response(429))
    with pytest.raises(GatewayRateLimitError) as exc_info:
        await client.create_chat_completion([{"role": "user", "content": "x"}])
    assert exc_info.value.message == "Too many requests. Please try again in a moment."


@pytest.mark.asyncio
async def test_transport_failure_is_gateway_error(gateway_factory):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = gateway_factory(handler)
    with pytest.raises(AIGatewayError) as exc_info:
        await client.create_chat_completion([{"role": "user", "content": "x"}])
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_invalid_json_is_gateway_error(gateway_factory):
    client, _ = gateway_factory(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(AIGatewayError):
        await client.create_chat_completion([{"role": "user", "content": "x"}])


class TestExtractors:
    def test_content_missing(self):
        assert extract_message_content({}) is None
        assert extract_message_content({"choices": []}) is None
        assert extract_message_content({"choices": [{"message": {"content": ""}}]}) is None

    def test_tool_arguments(self, completion):
        data = completion(tool_arguments={"language": "Hindi", "response": "नमस्ते"})
        assert extract_tool_arguments(data) == {"language": "Hindi", "response": "नमस्ते"}

    def test_no_tool_call(self, completion):
        assert extract_tool_arguments(completion("plain")) is None

    def test_malformed_tool_arguments(self, completion):
        with pytest.raises(ValueError):
            extract_tool_arguments(completion(tool_arguments="{not json"))

    def test_non_object_tool_arguments(self, completion):
        with pytest.raises(ValueError):
            extract_tool_arguments(completion(tool_arguments="[1, 2]"))

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "text",
            {"choices": "nope"},
            {"choices": [{"message": "nope"}]},
        ],
    )
    def test_unexpected_body_shapes(self, data):
        assert extract_message_content(data) is None
        assert extract_tool_arguments(data) is None

    def test_non_dict_tool_call_is_ignored(self):
        data = {"choices": [{"message": {"content": "Hi", "tool_calls": ["x"]}}]}
        assert extract_tool_arguments(data) is None
        assert extract_message_content(data) == "Hi"

    def test_non_string_tool_arguments(self):
        data = {"choices": [{"message": {"tool_calls": [{"function": {"arguments": {"a": 1}}}]}}]}
        with pytest.raises(ValueError):
            extract_tool_arguments(data)
