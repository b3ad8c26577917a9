# =============================================================================
# core/services/config_service.py - Application Config Access
# =============================================================================
# Hands the resolved application config to components that need it.
# The config is built once at startup from environment settings.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class AppConfig(BaseModel):
    """
    Runtime configuration shared with the application.

    Serializes with camelCase keys (apiKey, featureFlag).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: str = Field(
        default="default-api-key",
        alias="apiKey",
        description="API key for outbound integrations"
    )

    feature_flag: bool = Field(
        default=True,
        alias="featureFlag",
        description="Toggle for features under rollout"
    )


class ConfigService:
    """Read-only access to the AppConfig."""

    def __init__(self, config: AppConfig):
        self._config = config

    def get_config(self) -> AppConfig:
        return self._config

    @property
    def feature_flag(self) -> bool:
        return self._config.feature_flag
