"""Slack incoming webhook provider configuration."""

from typing import Optional

from pydantic import Field

from ..errors import MissingRequiredFieldError
from ..types import AlertType
from .base import AlertProvider, ClientConfig, ProviderConfig, register_provider


class WebhookURLNotSetError(MissingRequiredFieldError):
    """Exception raised when the Slack webhook URL is missing."""
    pass


class SlackConfig(ProviderConfig):
    """Slack incoming webhook settings."""

    webhook_url: str = Field(default='', description="Incoming webhook URL")
    title: str = Field(default='', description="Message title")
    client: Optional[ClientConfig] = Field(default=None, description="HTTP client configuration")

    def validate_config(self) -> None:
        self._require('webhook_url', error=WebhookURLNotSetError)


@register_provider(AlertType.SLACK)
class SlackAlertProvider(AlertProvider):
    config_class = SlackConfig
