"""
Configuration package for the AIVocal assistant backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    AIGatewaySettings,
    KnowledgeSettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "AIGatewaySettings",
    "KnowledgeSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
