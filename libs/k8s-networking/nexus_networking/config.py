"""Configuration for the networking manager."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkingSettings(BaseSettings):
    """Networking manager settings."""

    model_config = SettingsConfigDict(
        env_prefix="NEXUS_NETWORKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    # Route Settings
    route_target_port: str = Field(
        default="http",
        description="Named service port routes forward traffic to",
    )

    # Ingress Settings
    ingress_class_name: Optional[str] = None
    ingress_path: str = "/?(.*)"
    ingress_path_type: str = "ImplementationSpecific"
    ingress_rewrite_target: Optional[str] = Field(
        default="/$1",
        description="nginx rewrite-target annotation value; empty disables it",
    )

    # Client Settings
    request_timeout_seconds: Optional[float] = Field(
        default=None,
        description="Timeout passed to the Kubernetes client on each request",
    )


@lru_cache
def get_settings() -> NetworkingSettings:
    """Get cached settings instance."""
    return NetworkingSettings()


def configure_logging(settings: Optional[NetworkingSettings] = None) -> None:
    """Configure root logging at the settings' log level."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
