"""
Async client for the OpenAI-compatible AI gateway.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from app.config.settings import AIGatewaySettings, get_settings
from app.core.exceptions import (
    AIGatewayError,
    ConfigurationError,
    GatewayPaymentRequiredError,
    GatewayRateLimitError,
)

logger = logging.getLogger(__name__)

API_KEY_SETTING = "LOVABLE_API_KEY"


class AIGatewayClient:
    """Posts chat completions to the gateway and maps failures to exceptions."""

    def __init__(
        self,
        gateway_settings: Optional[AIGatewaySettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = gateway_settings or get_settings().ai_gateway
        self.base_url = self.settings.base_url.rstrip("/")
        self.model = self.settings.model
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def is_configured(self) -> bool:
        return self.settings.is_configured

    def ensure_configured(self) -> None:
        if not self.is_configured:
            raise ConfigurationError(API_KEY_SETTING)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.settings.timeout_seconds)
        return self._client

    def _get_headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
        }

    async def create_chat_completion(
        self,
        messages: List[Dict[str, Any]],
        *,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        tools: Optional[List[Dict[str, Any]]] = None,
        tool_choice: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Request a chat completion.

        Args:
            messages: OpenAI-style role/content messages
            max_tokens: Completion token cap, omitted when None
            temperature: Sampling temperature, omitted when None
            tools: Function tool definitions
            tool_choice: Forced tool selection

        Returns:
            Decoded gateway response body

        Raises:
            ConfigurationError: API key missing
            GatewayRateLimitError: Gateway answered 429
            GatewayPaymentRequiredError: Gateway answered 402
            AIGatewayError: Any other failure
        """
        self.ensure_configured()

        payload: Dict[str, Any] = {"model": self.model, "messages": messages}
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        if temperature is not None:
            payload["temperature"] = temperature
        if tools:
            payload["tools"] = tools
        if tool_choice:
            payload["tool_choice"] = tool_choice

        url = f"{self.base_url}/chat/completions"
        try:
            response = await self._get_client().post(
                url, json=payload, headers=self._get_headers()
            )
        except httpx.TimeoutException as e:
            logger.error(f"AI gateway timeout: {e}")
            raise AIGatewayError("AI gateway timeout") from e
        except httpx.HTTPError as e:
            logger.error(f"AI gateway request failed: {e}")
            raise AIGatewayError(f"AI gateway request failed: {e}") from e

        if response.status_code == 429:
            logger.warning("AI gateway rate limit hit", extra={"upstream_status": 429})
            raise GatewayRateLimitError()
        if response.status_code == 402:
            logger.warning("AI gateway payment required", extra={"upstream_status": 402})
            raise GatewayPaymentRequiredError()
        if response.is_error:
            logger.error(
                f"AI gateway error: {response.status_code} {response.text[:200]}",
                extra={"upstream_status": response.status_code},
            )
            raise AIGatewayError(
                f"AI gateway error: {response.status_code}",
                upstream_status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise AIGatewayError("AI gateway returned invalid JSON") from e

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


def _first_message(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        return {}
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return {}
    message = choices[0].get("message")
    return message if isinstance(message, dict) else {}


def extract_message_content(data: Any) -> Optional[str]:
    """Text content of the first choice, or None."""
    content = _first_message(data).get("content")
    return content if isinstance(content, str) and content else None


def extract_tool_arguments(data: Any) -> Optional[Dict[str, Any]]:
    """
    Parsed JSON arguments of the first tool call, or None when there is none.

    Raises:
        ValueError: The arguments are not a JSON object
    """
    tool_calls = _first_message(data).get("tool_calls")
    if not isinstance(tool_calls, list) or not tool_calls or not isinstance(tool_calls[0], dict):
        return None
    function = tool_calls[0].get("function")
    arguments = function.get("arguments") if isinstance(function, dict) else None
    if not arguments:
        return None
    if not isinstance(arguments, str):
        raise ValueError("Tool arguments must be a JSON string")
    parsed = json.loads(arguments)
    if not isinstance(parsed, dict):
        raise ValueError("Tool arguments must be a JSON object")
    return parsed
