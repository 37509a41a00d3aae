from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChatTurn(BaseModel):
    role: str
    content: str


class AssistantRequest(BaseModel):
    """Chat request body."""

    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    conversation_history: List[ChatTurn] = Field(
        default_factory=list, alias="conversationHistory"
    )

    @field_validator("message", mode="before")
    @classmethod
    def drop_non_string_message(cls, v: Any) -> Optional[str]:
        # Non-string messages are treated as missing and rejected with 400
        return v if isinstance(v, str) else None

    @field_validator("conversation_history", mode="before")
    @classmethod
    def default_history(cls, v: Any) -> Any:
        return v if v is not None else []


class VoiceAgentRequest(AssistantRequest):
    """Voice-agent body: only falsy messages count as missing."""

    @field_validator("message", mode="before")
    @classmethod
    def drop_non_string_message(cls, v: Any) -> Optional[str]:
        if not v:
            return None
        return v if isinstance(v, str) else str(v)


class AssistantReply(BaseModel):
    response: str
    language: str


class ErrorResponse(BaseModel):
    error: str
    error_code: str
    language: Optional[str] = None
    response: Optional[str] = None
    details: Optional[dict] = None
    request_id: Optional[str] = None
    timestamp: datetime
