"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode
from typing import Annotated, Optional, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _split_csv(v, default: List[str]) -> List[str]:
    if isinstance(v, str):
        return [item.strip() for item in v.split(",") if item.strip()]
    return v or default


class AIGatewaySettings(BaseSettings):
    """OpenAI-compatible AI gateway configuration"""

    api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("AI_GATEWAY_API_KEY", "LOVABLE_API_KEY"),
    )
    base_url: str = Field(default="https://ai.gateway.lovable.dev/v1")
    model: str = Field(default="google/gemini-2.5-flash")
    chat_max_tokens: int = Field(default=500, ge=1, le=8192)
    chat_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    timeout_seconds: int = Field(default=30, ge=1, le=300)

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    model_config = {
        "env_prefix": "AI_GATEWAY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }


class KnowledgeSettings(BaseSettings):
    """Knowledge base (Supabase REST) configuration"""

    supabase_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("KNOWLEDGE_SUPABASE_URL", "SUPABASE_URL"),
    )
    service_role_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "KNOWLEDGE_SERVICE_ROLE_KEY", "SUPABASE_SERVICE_ROLE_KEY"
        ),
    )
    table: str = Field(default="ai_knowledge")
    cache_ttl_seconds: int = Field(default=300, ge=0, le=86400)  # 5 minutes
    timeout_seconds: int = Field(default=10, ge=1, le=60)

    @property
    def is_configured(self) -> bool:
        return bool(self.supabase_url and self.service_role_key)

    model_config = {
        "env_prefix": "KNOWLEDGE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }


class SecuritySettings(BaseSettings):
    """CORS configuration"""

    cors_origins: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=False)
    cors_allow_methods: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["GET", "POST", "OPTIONS"]
    )
    cors_allow_headers: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["authorization", "x-client-info", "apikey", "content-type"]
    )

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        return _split_csv(v, ["*"])

    @field_validator('cors_allow_methods', 'cors_allow_headers', mode='before')
    @classmethod
    def parse_cors_lists(cls, v):
        return _split_csv(v, [])

    model_config = {
        "env_prefix": "SECURITY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="AIVocal Assistant")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", description="json or text")

    # Conversation Configuration
    chat_history_window: int = Field(default=6, ge=0, le=50)

    # Nested Settings
    ai_gateway: AIGatewaySettings = Field(default_factory=AIGatewaySettings)
    knowledge: KnowledgeSettings = Field(default_factory=KnowledgeSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
