"""Telegram bot provider configuration."""

from typing import Optional

from pydantic import Field

from ..errors import MissingRequiredFieldError
from ..types import AlertType
from .base import AlertProvider, ClientConfig, ProviderConfig, register_provider


API_URL = "https://api.telegram.org"


class TokenNotSetError(MissingRequiredFieldError):
    """Exception raised when the bot token is missing."""
    pass


class IDNotSetError(MissingRequiredFieldError):
    """Exception raised when the chat id is missing."""
    pass


class TelegramConfig(ProviderConfig):
    """Telegram bot settings."""

    token: str = Field(default='', description="Bot token")
    id: str = Field(default='', description="Chat id")
    topic_id: str = Field(default='', description="Forum topic id")
    api_url: str = Field(default=API_URL, description="Bot API base URL")
    client: Optional[ClientConfig] = Field(default=None, description="HTTP client configuration")

    def validate_config(self) -> None:
        self._require('token', error=TokenNotSetError)
        self._require('id', error=IDNotSetError)


@register_provider(AlertType.TELEGRAM)
class TelegramAlertProvider(AlertProvider):
    config_class = TelegramConfig
