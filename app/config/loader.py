"""
Configuration loader utility for environment-specific settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from .settings import (
    AIGatewaySettings,
    Environment,
    KnowledgeSettings,
    SecuritySettings,
    Settings,
)

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading environment-specific configurations"""

    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load configuration for the specified environment.

        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT env var or defaults to development

        Returns:
            Settings instance with environment-specific configuration
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT", "development")

        env = Environment(environment.lower())
        env_file = Path(f".env.{env.value}")

        if env_file.exists():
            # Nested settings read their own env file, so point each at this one
            path = str(env_file)
            return Settings(
                _env_file=path,
                environment=env,
                ai_gateway=AIGatewaySettings(_env_file=path),
                knowledge=KnowledgeSettings(_env_file=path),
                security=SecuritySettings(_env_file=path),
            )

        logger.warning(f"Environment file {env_file} not found, using default settings")
        return Settings(environment=env)

    @staticmethod
    def get_available_environments() -> list[str]:
        """Get list of available environment configurations"""
        env_files = []
        for env_file in Path(".").glob(".env.*"):
            env_name = env_file.name.replace(".env.", "")
            if env_name.endswith(".sample"):
                continue
            env_files.append(env_name)
        return sorted(env_files)

    @staticmethod
    def validate_environment_config(environment: str) -> bool:
        """
        Validate that an environment configuration exists and is usable.

        Production additionally requires the AI gateway key.

        Args:
            environment: Environment name to validate

        Returns:
            True if configuration is valid, False otherwise
        """
        try:
            env = Environment(environment.lower())
        except ValueError:
            return False

        if not Path(f".env.{env.value}").exists():
            return False

        settings = ConfigLoader.load_environment_config(env.value)
        if env == Environment.PRODUCTION and not settings.ai_gateway.is_configured:
            logger.error("AI gateway API key is required in production")
            return False
        return True

    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """
        Create a sample .env file for the specified environment.

        Args:
            environment: Target environment
            output_path: Optional custom output path

        Returns:
            Path to the created sample file
        """
        env = Environment(environment.lower())

        if output_path is None:
            output_path = f".env.{env.value}.sample"

        default_settings = Settings()
        gateway = default_settings.ai_gateway
        knowledge = default_settings.knowledge

        sample_content = f"""# Sample configuration for {env.value} environment
# Copy this file to .env.{env.value} and modify as needed

# Application Configuration
APP_NAME={default_settings.app_name}
APP_VERSION={default_settings.app_version}
ENVIRONMENT={env.value}
DEBUG={'true' if env == Environment.DEVELOPMENT else 'false'}

# Server Configuration
HOST={default_settings.host}
PORT={default_settings.port}
RELOAD={'true' if env == Environment.DEVELOPMENT else 'false'}
WORKERS={1 if env == Environment.DEVELOPMENT else 4}

# Logging Configuration
LOG_LEVEL={default_settings.log_level.value}
LOG_FORMAT={'text' if env == Environment.DEVELOPMENT else 'json'}

# Conversation Configuration
CHAT_HISTORY_WINDOW={default_settings.chat_history_window}

# AI Gateway Configuration
LOVABLE_API_KEY=your-gateway-api-key
AI_GATEWAY_BASE_URL={gateway.base_url}
AI_GATEWAY_MODEL={gateway.model}
AI_GATEWAY_CHAT_MAX_TOKENS={gateway.chat_max_tokens}
AI_GATEWAY_CHAT_TEMPERATURE={gateway.chat_temperature}
AI_GATEWAY_TIMEOUT_SECONDS={gateway.timeout_seconds}

# Knowledge Base Configuration
SUPABASE_URL=https://your-project.supabase.co
SUPABASE_SERVICE_ROLE_KEY=your-service-role-key
KNOWLEDGE_TABLE={knowledge.table}
KNOWLEDGE_CACHE_TTL_SECONDS={knowledge.cache_ttl_seconds}

# Security Configuration
SECURITY_CORS_ORIGINS=*
"""

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(sample_content)

        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
